from sqlalchemy import Column, Integer, String, Float, Boolean, Text, DateTime, JSON
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.associations import property_agents, property_amenities
from app.models.timestamps import utcnow

PROPERTY_TYPES = ("apartment", "villa", "commercial", "open-plot", "farm-land")
PROPERTY_STATUSES = ("for-sale", "for-rent", "sold", "rented")
FURNISHED_OPTIONS = ("unfurnished", "semi-furnished", "furnished")


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)

    # basic information
    title = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    price_per_sqft = Column(Float, nullable=True)
    location = Column(String(255), nullable=False, index=True)
    city = Column(String(100), nullable=True)
    area = Column(Float, nullable=False)
    type = Column(String(20), nullable=False, index=True)
    status = Column(String(20), nullable=False, index=True)

    images = Column(JSON, default=list)
    videos = Column(JSON, default=list)  # [{videoUrl, thumbnailUrl}]
    brochure = Column(JSON, nullable=True)  # {brochureLink, brochureThumbnail1..3}
    facing = Column(String(50), nullable=True)
    total_floors = Column(Integer, nullable=True)
    furnished = Column(String(20), nullable=True)
    possession = Column(String(100), nullable=True)
    rera_number = Column(String(100), nullable=True)
    developer_name = Column(String(150), nullable=True)
    featured = Column(Boolean, default=False)
    highlights = Column(JSON, default=list)

    # floor plans
    supports_floor_plans = Column(Boolean, default=False)
    has_towers = Column(Boolean, default=False)
    towers = Column(JSON, default=list)  # [{name, floors, units, floorPlans, facing}]
    floor_plans = Column(JSON, default=list)
    master_plan = Column(String(500), nullable=True)
    location_map = Column(String(500), nullable=True)

    # per-type details, only the one matching `type` is normally set
    apartment_details = Column(JSON, nullable=True)
    villa_details = Column(JSON, nullable=True)
    commercial_details = Column(JSON, nullable=True)
    plot_details = Column(JSON, nullable=True)
    farm_land_details = Column(JSON, nullable=True)

    location_details = Column(JSON, nullable=True)

    # media
    gallery = Column(JSON, default=list)
    construction_status = Column(JSON, default=list)
    walkthrough_images = Column(JSON, default=list)
    walkthrough_video = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    amenities = relationship(
        "Amenity",
        secondary=property_amenities,
        back_populates="properties",
        order_by="Amenity.category",
    )
    assigned_agents = relationship(
        "User",
        secondary=property_agents,
        back_populates="assigned_properties",
        order_by="User.id",
    )
    # deleting a property keeps its leads and inquiries, unlinked
    leads = relationship("Lead", back_populates="property")
    contacts = relationship("ContactSubmission", back_populates="property")
