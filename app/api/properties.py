import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.amenity import Amenity
from app.models.property import Property, PROPERTY_TYPES
from app.models.user import User
from app.api.deps import get_admin_from_token
from app.api.serializers import property_out
from app.schemas.property import PropertyCreate, PropertyUpdate
from app.services.listing import to_display, filter_properties, sort_properties
from app.services.property_form import (
    FORM_STEPS,
    compute_price_per_sqft,
    default_form,
    merge_for_edit,
    validate_all,
    validate_step,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Properties"])

DETAIL_COLUMNS = ("apartment_details", "villa_details", "commercial_details", "plot_details", "farm_land_details")
# steps checked on every save; amenities/images are enforced by the form flow only
SAVE_STEPS = (1, 2)


def _get_property(db: Session, property_id: int) -> Property:
    prop = db.query(Property).filter(Property.id == property_id).first()
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


def _load_amenities(db: Session, amenity_ids: list[int]) -> list[Amenity]:
    if not amenity_ids:
        return []
    amenities = db.query(Amenity).filter(Amenity.id.in_(amenity_ids)).all()
    missing = set(amenity_ids) - {a.id for a in amenities}
    if missing:
        raise HTTPException(status_code=400, detail=f"Unknown amenity ids: {sorted(missing)}")
    return amenities


@router.get("/properties")
def list_properties(
    db: Session = Depends(get_db),
    view: str | None = Query(None),
    category: str | None = Query(None),
    location: str | None = Query(None),
    name: str | None = Query(None),
    rent_buy: str | None = Query(None, alias="rentBuy"),
    property_type: str | None = Query(None, alias="propertyType"),
    bhk: list[str] | None = Query(None),
    facing: list[str] | None = Query(None),
    verified: bool = Query(False),
    construction_status: list[str] | None = Query(None, alias="constructionStatus"),
    budget: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
):
    props = db.query(Property).order_by(Property.created_at.desc(), Property.id.desc()).all()
    data = [property_out(p) for p in props]

    cards = filter_properties(
        [to_display(d) for d in data],
        category=category,
        location=location,
        name=name,
        rent_buy=rent_buy,
        property_type=property_type,
        bhk=bhk,
        facing=facing,
        verified=verified,
        construction_status=construction_status,
        budget=budget,
    )
    cards = sort_properties(cards, sort_by)
    if view == "card":
        return {"success": True, "data": cards}
    by_id = {d["id"]: d for d in data}
    return {"success": True, "data": [by_id[c["id"]] for c in cards]}


@router.get("/properties/form/defaults")
def get_form_defaults(type: str = Query(...)):
    if type not in PROPERTY_TYPES:
        raise HTTPException(status_code=400, detail="Invalid property type")
    return {"success": True, "steps": FORM_STEPS, "data": default_form(type)}


@router.post("/properties/validate")
def validate_property_form(payload: dict = Body(...)):
    step = payload.get("step")
    if step is None:
        errors = validate_all(payload)
    else:
        try:
            errors = validate_step(int(step), payload)
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail=f"Unknown form step: {step}")
    if errors:
        raise HTTPException(status_code=400, detail={"errors": errors})
    return {"success": True, "step": step, "steps": FORM_STEPS}


@router.get("/properties/{property_id}")
def get_property(property_id: int, db: Session = Depends(get_db)):
    return {"success": True, "data": property_out(_get_property(db, property_id))}


@router.get("/properties/{property_id}/form")
def get_property_form(property_id: int, db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    """Edit-mode form state: stored property laid over the empty form."""
    prop = _get_property(db, property_id)
    return {"success": True, "steps": FORM_STEPS, "data": merge_for_edit(default_form(prop.type), property_out(prop))}


@router.post("/properties", status_code=201)
def create_property(
    data: PropertyCreate,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    errors = validate_all(data.model_dump(by_alias=True), steps=SAVE_STEPS)
    if errors:
        raise HTTPException(status_code=400, detail={"errors": errors})

    columns = data.to_columns()
    amenity_ids = columns.pop("amenities", [])
    prop = Property(**columns)
    prop.price_per_sqft = compute_price_per_sqft(data.price, data.area)
    prop.amenities = _load_amenities(db, amenity_ids)
    db.add(prop)
    db.commit()
    db.refresh(prop)
    logger.info("Created property %s (%s)", prop.id, prop.type)
    return {"success": True, "data": property_out(prop)}


@router.put("/properties/{property_id}")
def update_property(
    property_id: int,
    data: PropertyUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    prop = _get_property(db, property_id)
    columns = data.to_columns()
    amenity_ids = columns.pop("amenities", None)
    for key in DETAIL_COLUMNS:
        sent = getattr(data, key)
        if sent is not None:
            columns[key] = {**(getattr(prop, key) or {}), **sent.model_dump(by_alias=True, exclude_unset=True)}
    if columns.get("price") and columns.get("area"):
        columns["price_per_sqft"] = compute_price_per_sqft(columns["price"], columns["area"])

    for key, value in columns.items():
        setattr(prop, key, value)
    if amenity_ids is not None:
        prop.amenities = _load_amenities(db, amenity_ids)

    errors = validate_all(property_out(prop), steps=SAVE_STEPS)
    if errors:
        db.rollback()
        raise HTTPException(status_code=400, detail={"errors": errors})
    db.commit()
    db.refresh(prop)
    return {"success": True, "data": property_out(prop)}


@router.delete("/properties/{property_id}")
def delete_property(
    property_id: int,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    prop = _get_property(db, property_id)
    db.delete(prop)
    db.commit()
    logger.info("Deleted property %s", property_id)
    return {"success": True, "message": "Property deleted successfully"}


@router.put("/properties/{property_id}/assign-agents")
def assign_agents(
    property_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    agent_ids = payload.get("agentIds")
    if not isinstance(agent_ids, list):
        raise HTTPException(status_code=400, detail="agentIds must be an array")
    try:
        ids = [int(a) for a in agent_ids]
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="agentIds must be an array of ids")
    prop = _get_property(db, property_id)
    agents = db.query(User).filter(User.id.in_(ids), User.role == "agent").all() if ids else []
    if len(agents) != len(set(ids)):
        raise HTTPException(status_code=404, detail="Agent not found")
    # one association table, so each agent's assignedProperties follows
    prop.assigned_agents = agents
    db.commit()
    db.refresh(prop)
    return {"message": "Agents assigned successfully", "property": property_out(prop)}
