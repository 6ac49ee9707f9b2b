from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.associations import property_agents, lead_agents
from app.models.timestamps import utcnow

USER_ROLES = ("super_admin", "agent")
USER_STATUSES = ("active", "inactive", "suspended")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(30), nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="agent")  # super_admin | agent
    status = Column(String(20), default="active")  # active | inactive | suspended
    agent_info = Column(JSON, nullable=True)  # specialties, experience, languages, bio, image
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    assigned_properties = relationship(
        "Property",
        secondary=property_agents,
        back_populates="assigned_agents",
        order_by="Property.id",
    )
    assigned_leads = relationship("Lead", secondary=lead_agents, back_populates="assigned_agents")
