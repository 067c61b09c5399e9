from portfolio_builder.extensions import db
from .base import BaseModel

class GalleryItem(BaseModel):
    __tablename__ = "gallery_items"

    portfolio_id = db.Column(db.String(36), db.ForeignKey("portfolios.id"), nullable=False, index=True)
    title = db.Column(db.String(300), nullable=True)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=False)
    type = db.Column(db.String(20), nullable=False, default="photo")  # photo, video
    order = db.Column(db.Integer, nullable=False, default=0)

    portfolio = db.relationship("Portfolio", back_populates="gallery_items")

    __table_args__ = (
        db.Index("idx_gallery_portfolio_order", "portfolio_id", "order"),
    )
