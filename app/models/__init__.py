from app.models.user import User
from app.models.amenity import Amenity
from app.models.property import Property
from app.models.lead import Lead
from app.models.contact import ContactSubmission
from app.models.press_release import PressRelease
from app.models.site_settings import SiteSettings

__all__ = ["User", "Amenity", "Property", "Lead", "ContactSubmission", "PressRelease", "SiteSettings"]
