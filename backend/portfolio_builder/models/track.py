from portfolio_builder.extensions import db
from .base import BaseModel

class Track(BaseModel):
    __tablename__ = "tracks"

    portfolio_id = db.Column(db.String(36), db.ForeignKey("portfolios.id"), nullable=False, index=True)
    title = db.Column(db.String(300), nullable=False)
    description = db.Column(db.Text, nullable=True)
    duration = db.Column(db.Integer, nullable=False, default=0)  # seconds
    audio_url = db.Column(db.String(512), nullable=False)
    thumbnail_url = db.Column(db.String(512), nullable=True)
    composer_notes = db.Column(db.Text, nullable=True)
    lyrics = db.Column(db.Text, nullable=True)
    release_date = db.Column(db.Date, nullable=True)
    is_published = db.Column(db.Boolean, default=True, index=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    portfolio = db.relationship("Portfolio", back_populates="tracks")

    __table_args__ = (
        db.Index("idx_track_portfolio_order", "portfolio_id", "order"),
    )
