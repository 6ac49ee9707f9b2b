"""ORM rows -> camelCase JSON dicts, as the frontend reads them."""
from datetime import datetime

from pydantic.alias_generators import to_camel

from app.models.timestamps import iso

PROPERTY_SUMMARY_FIELDS = ("title", "location", "price", "status", "images")


def _columns(row, exclude=()) -> dict:
    out = {}
    for col in row.__table__.columns:
        if col.name in exclude:
            continue
        value = getattr(row, col.name)
        if isinstance(value, datetime):
            value = iso(value)
        out[to_camel(col.name)] = value
    out["_id"] = row.id
    return out


def _pick(data: dict, fields) -> dict:
    out = {"id": data["id"], "_id": data["id"]}
    for f in fields:
        out[f] = data.get(f)
    return out


def amenity_out(a) -> dict:
    return _columns(a)


def user_out(u, with_properties: bool = False) -> dict:
    data = _columns(u, exclude=("password_hash",))
    data["agentInfo"] = u.agent_info or {}
    data["assignedProperties"] = (
        [_pick(property_out(p, with_agents=False), PROPERTY_SUMMARY_FIELDS) for p in u.assigned_properties]
        if with_properties
        else [p.id for p in u.assigned_properties]
    )
    return data


def agent_brief(u) -> dict:
    return {
        "id": u.id,
        "_id": u.id,
        "name": u.name,
        "email": u.email,
        "phone": u.phone or "",
        "agentInfo": u.agent_info or {},
    }


def property_out(p, with_agents: bool = True) -> dict:
    data = _columns(p)
    for key in ("images", "videos", "highlights", "towers", "floorPlans", "gallery",
                "constructionStatus", "walkthroughImages"):
        if data.get(key) is None:
            data[key] = []
    data["amenities"] = [amenity_out(a) for a in p.amenities]
    if with_agents:
        data["assignedAgents"] = [agent_brief(u) for u in p.assigned_agents]
    return data


def lead_out(lead) -> dict:
    data = _columns(lead)
    data["notes"] = lead.notes or []
    data["propertyId"] = (
        {"id": lead.property.id, "_id": lead.property.id, "title": lead.property.title, "type": lead.property.type}
        if lead.property
        else None
    )
    data["assignedAgents"] = [
        {"id": u.id, "_id": u.id, "name": u.name, "email": u.email} for u in lead.assigned_agents
    ]
    return data


def contact_out(c) -> dict:
    data = _columns(c)
    data["propertyId"] = (
        _pick(property_out(c.property, with_agents=False), ("title", "price", "location", "type", "status"))
        if c.property
        else None
    )
    return data


def press_release_out(pr) -> dict:
    data = _columns(pr)
    data["gallery"] = pr.gallery or []
    return data


def settings_out(s) -> dict:
    return _columns(s)
