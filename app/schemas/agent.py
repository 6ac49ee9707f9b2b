from typing import Optional

from pydantic import BaseModel

from app.schemas.base import CamelModel


class AgentInfo(CamelModel):
    specialties: list[str] = []
    experience: Optional[str] = None
    languages: list[str] = []
    bio: Optional[str] = None
    image: Optional[str] = None


class AgentCreateRequest(CamelModel):
    name: str
    email: str
    password: str
    phone: Optional[str] = None
    status: Optional[str] = None
    agent_info: Optional[AgentInfo] = None


class AgentUpdateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    agent_info: Optional[AgentInfo] = None


class AgentStatusRequest(BaseModel):
    status: str  # active | inactive | suspended
