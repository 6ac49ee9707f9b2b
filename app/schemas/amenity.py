from typing import Literal, Optional

from app.schemas.base import CamelModel

AmenityCategory = Literal[
    "building", "recreational", "indoor", "outdoor", "safety",
    "convenience", "connectivity", "farming", "others",
]


class AmenityCreateRequest(CamelModel):
    title: str
    category: AmenityCategory
    image: Optional[str] = None
    is_active: bool = True


class AmenityUpdateRequest(CamelModel):
    title: Optional[str] = None
    category: Optional[AmenityCategory] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
