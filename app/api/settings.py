import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.site_settings import SiteSettings
from app.api.deps import get_admin_from_token
from app.api.serializers import settings_out
from app.schemas.site_settings import (
    AboutUsPage,
    SiteSettingsRequest,
    SocialMedia,
    Testimonial,
    TestimonialsPage,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Settings"])

DEFAULT_SITE_NAME = "BNRHomes"
DEFAULT_SITE_DESCRIPTION = "Your trusted real estate partner"


def initial_settings() -> dict:
    """Column values for a brand new settings row, every section present."""
    return {
        "site_name": DEFAULT_SITE_NAME,
        "site_description": DEFAULT_SITE_DESCRIPTION,
        "contact_email": "",
        "contact_phone": "",
        "contact_phone2": "",
        "contact_banner": "",
        "website_url": "",
        "map_url": "",
        "address": "",
        "social_media": SocialMedia().model_dump(by_alias=True),
        "hero_title": "",
        "hero_subtitle": "",
        "hero_image": "",
        "about_title": "",
        "about_text": "",
        "services_text": "",
        "about_image": "",
        "about_content": [],
        "testimonials_page": TestimonialsPage(testimonials=[Testimonial()]).model_dump(by_alias=True),
        "about_us_page": AboutUsPage().model_dump(by_alias=True),
    }


def get_or_create_settings(db: Session) -> SiteSettings:
    settings = db.query(SiteSettings).order_by(SiteSettings.id).first()
    if not settings:
        settings = SiteSettings(site_name=DEFAULT_SITE_NAME, site_description=DEFAULT_SITE_DESCRIPTION)
        db.add(settings)
        db.commit()
        db.refresh(settings)
        logger.info("Created default site settings")
    return settings


@router.get("/settings")
def get_settings(db: Session = Depends(get_db)):
    return settings_out(get_or_create_settings(db))


@router.post("/settings")
def create_settings(
    data: SiteSettingsRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    if db.query(SiteSettings).first():
        raise HTTPException(status_code=400, detail="Settings already exist. Use PUT to update instead.")
    values = initial_settings()
    values.update({k: v for k, v in data.to_columns().items() if v is not None})
    settings = SiteSettings(**values)
    db.add(settings)
    db.commit()
    db.refresh(settings)
    return {"message": "CMS settings created successfully", "data": settings_out(settings)}


@router.put("/settings")
def update_settings(
    data: SiteSettingsRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    settings = db.query(SiteSettings).order_by(SiteSettings.id).first()
    if not settings:
        settings = SiteSettings()
        db.add(settings)
    # top-level keys are replaced wholesale, like the admin form sends them
    for key, value in data.to_columns().items():
        setattr(settings, key, value)
    db.commit()
    db.refresh(settings)
    return {"message": "Site settings updated successfully", "data": settings_out(settings)}
