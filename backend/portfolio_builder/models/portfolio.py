from portfolio_builder.extensions import db
from .base import BaseModel
from .owner_mixin import OwnerMixin

class Portfolio(BaseModel, OwnerMixin):
    __tablename__ = 'portfolios'

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    status = db.Column(db.String(50), default='draft', index=True)
    is_default = db.Column(db.Boolean, default=False)
    theme_name = db.Column(db.String(100), nullable=True)
    seo_title = db.Column(db.String(200), nullable=True)
    seo_description = db.Column(db.String(500), nullable=True)

    # Sparse per-section overrides, see domain.sections.overrides
    sections_config = db.Column(db.JSON, nullable=False, default=dict)

    # Hero
    hero_title = db.Column(db.String(300), nullable=True)
    hero_subtitle = db.Column(db.String(300), nullable=True)
    hero_image_url = db.Column(db.String(512), nullable=True)
    hero_cta_buttons = db.Column(db.JSON, nullable=True)

    # About
    artist_name = db.Column(db.String(300), nullable=True)
    about_text = db.Column(db.Text, nullable=True)
    profile_photo_url = db.Column(db.String(512), nullable=True)

    # List sections
    press_json = db.Column(db.JSON, nullable=True)
    skills_json = db.Column(db.JSON, nullable=True)
    testimonials_json = db.Column(db.JSON, nullable=True)
    hobbies_json = db.Column(db.JSON, nullable=True)
    key_projects_json = db.Column(db.JSON, nullable=True)
    sponsors_json = db.Column(db.JSON, nullable=True)

    # Resume
    resume_url = db.Column(db.String(512), nullable=True)

    # Social links
    twitter_url = db.Column(db.String(512), nullable=True)
    instagram_url = db.Column(db.String(512), nullable=True)
    linkedin_url = db.Column(db.String(512), nullable=True)
    github_url = db.Column(db.String(512), nullable=True)
    website_url = db.Column(db.String(512), nullable=True)
    youtube_url = db.Column(db.String(512), nullable=True)

    # Contact
    contact_description = db.Column(db.Text, nullable=True)
    contact_email = db.Column(db.String(300), nullable=True)
    contact_phone = db.Column(db.String(300), nullable=True)
    contact_location = db.Column(db.String(300), nullable=True)

    # Footer
    footer_text = db.Column(db.String(300), nullable=True)
    footer_about_summary = db.Column(db.Text, nullable=True)
    footer_links_json = db.Column(db.JSON, nullable=True)
    footer_social_links_json = db.Column(db.JSON, nullable=True)
    footer_copyright_text = db.Column(db.String(300), nullable=True)
    footer_show_social_links = db.Column(db.Boolean, nullable=True)
    footer_show_about_summary = db.Column(db.Boolean, nullable=True)
    footer_show_links = db.Column(db.Boolean, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("user_id", "slug", name="uq_portfolio_slug_per_user"),
    )

    owner = db.relationship("User", back_populates="portfolios")

    tracks = db.relationship(
        "Track",
        back_populates="portfolio",
        order_by="Track.order",
        cascade="all, delete-orphan"
    )
    gallery_items = db.relationship(
        "GalleryItem",
        back_populates="portfolio",
        order_by="GalleryItem.order",
        cascade="all, delete-orphan"
    )
    contact_messages = db.relationship(
        "ContactMessage",
        cascade="all, delete-orphan"
    )

    @property
    def is_published(self):
        return self.status == "published"
