from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class PressReleaseCreateRequest(CamelModel):
    title: str
    image: str
    description: Optional[str] = None
    gallery: list[str] = []
    category: Optional[str] = None
    date: Optional[datetime] = None
    published: bool = True


class PressReleaseUpdateRequest(CamelModel):
    title: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    gallery: Optional[list[str]] = None
    category: Optional[str] = None
    date: Optional[datetime] = None
    published: Optional[bool] = None
