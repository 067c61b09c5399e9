from portfolio_builder.extensions import db
from .base import BaseModel

class ContactMessage(BaseModel):
    __tablename__ = "contact_messages"

    portfolio_id = db.Column(db.String(36), db.ForeignKey("portfolios.id"), nullable=False, index=True)
    email = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    delivered = db.Column(db.Boolean, nullable=False, default=False)
