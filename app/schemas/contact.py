from typing import Optional

from pydantic import BaseModel

from app.schemas.base import CamelModel


class ContactSubmitRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    property_id: Optional[int] = None


class ContactStatusRequest(BaseModel):
    status: str  # new | read | responded


class GeneralEnquiryRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    subject: Optional[str] = None
