from typing import Optional

from app.schemas.base import CamelModel


class SocialMedia(CamelModel):
    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    linkedin: str = ""


class Testimonial(CamelModel):
    name: str = ""
    role: str = ""
    image: str = ""
    description: str = ""


class TestimonialsPage(CamelModel):
    banner_image: str = ""
    testimonials: list[Testimonial] = []


class AboutContentItem(CamelModel):
    title: str = ""
    description: str = ""


class Statistics(CamelModel):
    years_experience: str = ""
    partnerships: str = ""
    properties_closed: str = ""
    happy_clients: str = ""
    locations: str = ""


class AboutUsPage(CamelModel):
    banner_image: str = ""
    page_title: str = ""
    welcome_image: str = ""
    welcome_title: str = ""
    intro_text: str = ""
    detailed_description: str = ""
    vision_image: str = ""
    vision_title: str = ""
    vision_text: str = ""
    vision_text2: str = ""
    goal_image: str = ""
    goal_title: str = ""
    goal_text: str = ""
    goal_text2: str = ""
    mission_image: str = ""
    mission_title: str = ""
    mission_text: str = ""
    mission_text2: str = ""
    statistics: Statistics = Statistics()


class SiteSettingsRequest(CamelModel):
    site_name: Optional[str] = None
    site_description: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_phone2: Optional[str] = None
    contact_banner: Optional[str] = None
    website_url: Optional[str] = None
    map_url: Optional[str] = None
    address: Optional[str] = None
    social_media: Optional[SocialMedia] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_image: Optional[str] = None
    about_title: Optional[str] = None
    about_text: Optional[str] = None
    services_text: Optional[str] = None
    about_image: Optional[str] = None
    about_content: Optional[list[AboutContentItem]] = None
    testimonials_page: Optional[TestimonialsPage] = None
    about_us_page: Optional[AboutUsPage] = None
