from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON

from app.db.session import Base
from app.models.timestamps import utcnow


class PressRelease(Base):
    __tablename__ = "press_releases"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String(500), nullable=False)  # cover image
    gallery = Column(JSON, default=list)
    category = Column(String(100), nullable=True)
    date = Column(DateTime(timezone=True), default=utcnow)
    published = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
