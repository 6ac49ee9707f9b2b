import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.lead import Lead, LEAD_STATUSES, LEAD_PRIORITIES
from app.models.property import Property
from app.models.user import User
from app.api.deps import get_admin_from_token
from app.api.serializers import lead_out
from app.schemas.lead import LeadCreateRequest, LeadUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Leads"])


def _get_lead(db: Session, lead_id: int) -> Lead:
    lead = db.query(Lead).filter(Lead.id == lead_id).first()
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead


def _check_enums(status: str | None, priority: str | None) -> None:
    if status is not None and status not in LEAD_STATUSES:
        raise HTTPException(status_code=400, detail="Invalid status")
    if priority is not None and priority not in LEAD_PRIORITIES:
        raise HTTPException(status_code=400, detail="Invalid priority")


@router.get("/leads")
def list_leads(
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
    status: str | None = Query(None),
):
    q = db.query(Lead)
    # unknown status values are ignored rather than rejected
    if status in LEAD_STATUSES:
        q = q.filter(Lead.status == status)
    leads = q.order_by(Lead.created_at.desc(), Lead.id.desc()).all()
    return {"success": True, "data": [lead_out(L) for L in leads]}


@router.post("/leads", status_code=201)
def create_lead(data: LeadCreateRequest, db: Session = Depends(get_db)):
    if not data.name or not data.email or not data.property_id or not data.source:
        raise HTTPException(status_code=400, detail="name, email, propertyId, and source are required")
    _check_enums(data.status, data.priority)
    prop = db.query(Property).filter(Property.id == data.property_id).first()
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    lead = Lead(
        name=data.name,
        email=data.email,
        phone=data.phone or "",
        message=data.message or "",
        source=data.source,
        property_id=prop.id,
        status=data.status or "new",
        priority=data.priority or "low",
        notes=data.notes or [],
        follow_up_date=data.follow_up_date,
    )
    lead.assigned_agents = list(prop.assigned_agents)
    db.add(lead)
    db.commit()
    db.refresh(lead)
    logger.info("New lead %s for property %s from %s", lead.id, prop.id, lead.source)
    return {"success": True, "data": lead_out(lead)}


@router.put("/leads/{lead_id}")
def update_lead(
    lead_id: int,
    data: LeadUpdateRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    lead = _get_lead(db, lead_id)
    sent = data.model_fields_set
    _check_enums(data.status if "status" in sent else None, data.priority if "priority" in sent else None)
    if "status" in sent and data.status is not None:
        lead.status = data.status
    if "priority" in sent and data.priority is not None:
        lead.priority = data.priority
    if "assigned_agents" in sent:
        ids = data.assigned_agents or []
        agents = db.query(User).filter(User.id.in_(ids), User.role == "agent").all() if ids else []
        if len(agents) != len(set(ids)):
            raise HTTPException(status_code=404, detail="Agent not found")
        lead.assigned_agents = agents
    if "notes" in sent:
        lead.notes = data.notes or []
    if "follow_up_date" in sent:
        lead.follow_up_date = data.follow_up_date
    db.commit()
    db.refresh(lead)
    return {"success": True, "data": lead_out(lead)}


@router.delete("/leads/{lead_id}")
def delete_lead(
    lead_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    lead = _get_lead(db, lead_id)
    db.delete(lead)
    db.commit()
    return {"success": True}
