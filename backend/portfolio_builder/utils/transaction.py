from contextlib import contextmanager
from portfolio_builder.extensions import db

@contextmanager
def transactional(session=None):
    """Context manager for database transactions."""
    session = session or db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
