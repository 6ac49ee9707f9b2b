from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from app.db.session import Base
from app.models.timestamps import utcnow


class SiteSettings(Base):
    """Singleton row with site-wide content (hero, about page, testimonials, contact)."""
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, index=True)
    site_name = Column(String(150), default="BNRHomes")
    site_description = Column(Text, nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_phone2 = Column(String(50), nullable=True)
    contact_banner = Column(String(500), nullable=True)
    website_url = Column(String(255), nullable=True)
    map_url = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    social_media = Column(JSON, nullable=True)  # facebook, twitter, instagram, linkedin
    hero_title = Column(String(255), nullable=True)
    hero_subtitle = Column(Text, nullable=True)
    hero_image = Column(String(500), nullable=True)
    about_title = Column(String(255), nullable=True)
    about_text = Column(Text, nullable=True)
    services_text = Column(Text, nullable=True)
    about_image = Column(String(500), nullable=True)
    about_content = Column(JSON, default=list)  # [{title, description}]
    testimonials_page = Column(JSON, nullable=True)  # {bannerImage, testimonials: [...]}
    about_us_page = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
