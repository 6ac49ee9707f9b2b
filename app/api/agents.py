import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.property import Property
from app.models.user import User, USER_STATUSES
from app.api.deps import get_admin_from_token
from app.api.serializers import user_out
from app.core.security import hash_password
from app.schemas.agent import AgentCreateRequest, AgentUpdateRequest, AgentStatusRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Agents"])


def _get_agent(db: Session, agent_id: int) -> User:
    agent = db.query(User).filter(User.id == agent_id, User.role == "agent").first()
    if not agent:
        raise HTTPException(status_code=404, detail="Agent not found")
    return agent


@router.get("/agents")
def list_agents(
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
    status: str | None = Query(None),
    search: str | None = Query(None),
):
    q = db.query(User).filter(User.role == "agent")
    if status:
        q = q.filter(User.status == status)
    if search:
        s = f"%{search}%"
        q = q.filter((User.name.ilike(s)) | (User.email.ilike(s)))
    agents = q.order_by(User.created_at.desc(), User.id.desc()).all()
    return [user_out(a) for a in agents]


@router.get("/agents/{agent_id}")
def get_agent(agent_id: int, db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    return user_out(_get_agent(db, agent_id), with_properties=True)


@router.post("/agents", status_code=201)
def create_agent(
    data: AgentCreateRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    if db.query(User).filter(User.email == data.email).first():
        raise HTTPException(status_code=409, detail="Email already registered")
    status = data.status or "active"
    if status not in USER_STATUSES:
        raise HTTPException(status_code=400, detail="Invalid status")
    agent = User(
        name=data.name,
        email=data.email,
        phone=data.phone or None,
        password_hash=hash_password(data.password),
        role="agent",
        status=status,
        agent_info=data.to_columns().get("agent_info"),
    )
    db.add(agent)
    db.commit()
    db.refresh(agent)
    logger.info("Created agent %s", agent.email)
    return user_out(agent)


@router.put("/agents/{agent_id}")
def update_agent(
    agent_id: int,
    data: AgentUpdateRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    agent = _get_agent(db, agent_id)
    if data.name is not None:
        agent.name = data.name
    if data.email is not None:
        existing = db.query(User).filter(User.email == data.email, User.id != agent.id).first()
        if existing:
            raise HTTPException(status_code=409, detail="Email already in use")
        agent.email = data.email
    # blank password means "keep the current one"
    if data.password:
        agent.password_hash = hash_password(data.password)
    if data.phone is not None:
        agent.phone = data.phone
    if data.status is not None:
        if data.status not in USER_STATUSES:
            raise HTTPException(status_code=400, detail="Invalid status")
        agent.status = data.status
    if data.agent_info is not None:
        agent.agent_info = {
            **(agent.agent_info or {}),
            **data.agent_info.model_dump(by_alias=True, exclude_unset=True),
        }
    db.commit()
    db.refresh(agent)
    return user_out(agent, with_properties=True)


@router.patch("/agents/{agent_id}/status")
def update_agent_status(
    agent_id: int,
    data: AgentStatusRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    if data.status not in USER_STATUSES:
        raise HTTPException(status_code=400, detail="Invalid status")
    agent = _get_agent(db, agent_id)
    agent.status = data.status
    db.commit()
    db.refresh(agent)
    return user_out(agent)


@router.delete("/agents/{agent_id}")
def delete_agent(
    agent_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    agent = _get_agent(db, agent_id)
    # association rows go with the agent, properties and leads stay
    db.delete(agent)
    db.commit()
    logger.info("Deleted agent %s", agent_id)
    return {"message": "Agent deleted successfully"}


@router.put("/agents/{agent_id}/assign-properties")
def assign_properties(
    agent_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    property_ids = payload.get("propertyIds")
    if not isinstance(property_ids, list):
        raise HTTPException(status_code=400, detail="propertyIds must be an array")
    try:
        ids = [int(p) for p in property_ids]
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="propertyIds must be an array of ids")
    agent = _get_agent(db, agent_id)
    props = db.query(Property).filter(Property.id.in_(ids)).all() if ids else []
    if len(props) != len(set(ids)):
        raise HTTPException(status_code=404, detail="Property not found")
    agent.assigned_properties = props
    db.commit()
    return {"message": "Properties updated successfully"}
