"""Card projection, filters and sorting for the public property listing."""
import re
from datetime import datetime

from dateutil import parser as date_parser

READY_TO_MOVE = "Ready to move"
UNDER_CONSTRUCTION = "Under Construction"


def _bedrooms_bathrooms(p: dict) -> tuple:
    if p.get("type") == "apartment":
        details = p.get("apartmentDetails") or {}
    elif p.get("type") == "villa":
        details = p.get("villaDetails") or {}
    else:
        return None, None
    return details.get("bedrooms"), details.get("bathrooms")


def _category(ptype: str | None) -> str | None:
    if ptype == "apartment":
        return "apartments"
    if ptype == "villa":
        return "residential"
    return ptype


def _plain_number(value: float):
    return int(value) if float(value).is_integer() else value


def price_label(price: float, status: str | None) -> str:
    if status == "for-sale":
        return f"₹{price / 100000:.2f} Cr"
    return f"₹{price:,.0f}/month"


def to_display(p: dict) -> dict:
    """Listing card for a serialized property."""
    bedrooms, bathrooms = _bedrooms_bathrooms(p)
    bhk_type = (p.get("apartmentDetails") or {}).get("bhkType") or None
    price = float(p.get("price") or 0)
    area = float(p.get("area") or 0)
    images = p.get("images") or []
    return {
        "id": p.get("id"),
        "title": p.get("title"),
        "location": p.get("location"),
        "image": images[0] if images else "/placeholder.svg",
        "possession": p.get("possession"),
        "featured": bool(p.get("featured")),
        "constructionStatus": p.get("constructionStatus") or [],
        "bhkType": bhk_type,
        "bhk": bhk_type.upper().replace("BHK", " BHK") if bhk_type else None,
        "beds": f"{bedrooms} BHK" if bedrooms else None,
        "bathrooms": f"{bathrooms} Bath" if bathrooms else None,
        "sqft": f"{_plain_number(area)} sq ft",
        "price": price_label(price, p.get("status")),
        "avgPrice": f"₹{round(price / area) if area else 0}/sq ft",
        "priceValue": price,
        "propertyType": _category(p.get("type")),
        "rentBuy": "buy" if p.get("status") == "for-sale" else "rent",
        "facing": p.get("facing") or None,
    }


def _possession_date(text: str, today: datetime) -> datetime | None:
    # missing month/day count as January 1st
    try:
        return date_parser.parse(text, default=datetime(today.year, 1, 1))
    except (ValueError, OverflowError):
        pass
    year = re.search(r"\d{4}", text)
    if year:
        return datetime(int(year.group(0)), 1, 1)
    return None


def construction_state(possession: str | None, today: datetime | None = None) -> tuple[bool, bool]:
    """(ready_to_move, under_construction) read from the free-text possession field."""
    pos = (possession or "").lower().strip()
    today = today or datetime.now()
    when = _possession_date(pos, today) if pos else None
    if when is not None and when.tzinfo is not None:
        when = when.replace(tzinfo=None)
    ready = "ready" in pos or "immediate" in pos or (when is not None and when < today)
    under = "under" in pos or (when is not None and when > today)
    return ready, under


def filter_properties(
    items: list[dict],
    category: str | None = None,
    location: str | None = None,
    name: str | None = None,
    rent_buy: str | None = None,
    property_type: str | None = None,
    bhk: list[str] | None = None,
    facing: list[str] | None = None,
    verified: bool = False,
    construction_status: list[str] | None = None,
    budget: str | None = None,
    today: datetime | None = None,
) -> list[dict]:
    """Filters work on card projections (see to_display)."""
    out = list(items)
    if category:
        if category == "residential":
            out = [p for p in out if p["propertyType"] in ("residential", "apartments")]
        else:
            out = [p for p in out if p["propertyType"] == category]
    if location:
        needle = location.lower()
        out = [p for p in out if needle in (p.get("location") or "").lower()]
    if name:
        needle = name.lower()
        out = [p for p in out if needle in (p.get("title") or "").lower()]
    if rent_buy and rent_buy != "any":
        out = [p for p in out if p["rentBuy"] == rent_buy]
    if property_type and property_type != "all":
        out = [p for p in out if p["propertyType"] == property_type]
    if bhk:
        out = [p for p in out if (p.get("bhkType") or "") in bhk]
    if facing:
        out = [p for p in out if (p.get("facing") or "") in facing]
    if verified:
        out = [p for p in out if p.get("featured") is True]
    if construction_status:
        kept = []
        for p in out:
            ready, under = construction_state(p.get("possession"), today)
            if READY_TO_MOVE in construction_status and ready:
                kept.append(p)
            elif UNDER_CONSTRUCTION in construction_status and under:
                kept.append(p)
        out = kept
    if budget == "no-budget":
        out = [p for p in out if p["priceValue"] == 0]
    return out


def sort_properties(items: list[dict], sort_by: str | None) -> list[dict]:
    if sort_by == "price-low-high":
        return sorted(items, key=lambda p: p["priceValue"])
    if sort_by == "price-high-low":
        return sorted(items, key=lambda p: p["priceValue"], reverse=True)
    return list(items)
