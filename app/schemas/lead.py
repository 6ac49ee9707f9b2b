from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class LeadCreateRequest(CamelModel):
    # required ones are checked in the route so the client gets a 400 with a message
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    source: Optional[str] = None
    property_id: Optional[int] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    notes: Optional[list[str]] = None
    follow_up_date: Optional[datetime] = None


class LeadUpdateRequest(CamelModel):
    status: Optional[str] = None
    priority: Optional[str] = None
    assigned_agents: Optional[list[int]] = None
    notes: Optional[list[str]] = None
    follow_up_date: Optional[datetime] = None
