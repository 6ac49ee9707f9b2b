from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.associations import property_amenities
from app.models.timestamps import utcnow

AMENITY_CATEGORIES = (
    "building",
    "recreational",
    "indoor",
    "outdoor",
    "safety",
    "convenience",
    "connectivity",
    "farming",
    "others",
)


class Amenity(Base):
    __tablename__ = "amenities"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(150), nullable=False)
    image = Column(String(500), nullable=True)  # icon or image url
    category = Column(String(30), nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # deleting an amenity drops its property links with it
    properties = relationship("Property", secondary=property_amenities, back_populates="amenities")
