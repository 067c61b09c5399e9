from portfolio_builder.extensions import db

class OwnerMixin:
    user_id = db.Column(
        db.String(36),
        db.ForeignKey('users.id'),
        nullable=False,
        index=True
    )
