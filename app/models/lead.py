from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.associations import lead_agents
from app.models.timestamps import utcnow

LEAD_STATUSES = ("new", "contacted", "closed")
LEAD_PRIORITIES = ("low", "medium", "high")


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=True)
    message = Column(Text, nullable=True)
    source = Column(String(50), nullable=False)  # e.g. property_contact_form, website
    status = Column(String(20), default="new")  # new | contacted | closed
    priority = Column(String(10), default="low")  # low | medium | high
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="SET NULL"), nullable=True)
    notes = Column(JSON, default=list)
    follow_up_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    property = relationship("Property", back_populates="leads")
    assigned_agents = relationship(
        "User",
        secondary=lead_agents,
        back_populates="assigned_leads",
        order_by="User.id",
    )
