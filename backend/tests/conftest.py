import io

import pytest
from flask_jwt_extended import create_access_token

from portfolio_builder import create_app
from portfolio_builder.application.portfolios.create_portfolio import create_portfolio
from portfolio_builder.domain.sections.registry import SectionDefinition, SectionRegistry
from portfolio_builder.extensions import db as _db
from portfolio_builder.models.user import User


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_ROOT"] = str(tmp_path / "uploads")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


def _make_user(username, role="user"):
    user = User()
    user.email = f"{username}@example.com"
    user.username = username
    user.role = role
    user.set_password("correct-horse")
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def user(app):
    return _make_user("ada")


@pytest.fixture
def other_user(app):
    return _make_user("grace")


@pytest.fixture
def admin_user(app):
    return _make_user("root", role="admin")


def bearer(user):
    token = create_access_token(identity=user.id, additional_claims={"role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(user):
    return bearer(user)


@pytest.fixture
def headers_for(app):
    return bearer


@pytest.fixture
def make_portfolio(user):
    def factory(owner=None, **data):
        data.setdefault("name", "Main Portfolio")
        data.setdefault("slug", "main")
        return create_portfolio(owner_id=(owner or user).id, data=data)

    return factory


@pytest.fixture
def portfolio(make_portfolio):
    return make_portfolio()


@pytest.fixture
def small_registry():
    return SectionRegistry([
        SectionDefinition("hero", "Hero", 0, True, {}),
        SectionDefinition("about", "About Me", 1, True, {}),
        SectionDefinition("tracks", "Music Gallery", 2, True, {}),
        SectionDefinition("testimonials", "Testimonials", 6, False, {}),
    ])


@pytest.fixture
def png_upload():
    def factory(name="photo.png"):
        return (io.BytesIO(b"\x89PNG\r\n\x1a\nfake"), name)

    return factory
