"""Admin analytics: period metrics vs last month, distributions, dashboard counters."""
from collections import OrderedDict
from datetime import datetime, timedelta, timezone

from app.models.timestamps import as_utc

TIME_RANGES = {"7d": 7, "30d": 30, "90d": 90}


def _created(item: dict) -> datetime | None:
    value = item.get("createdAt")
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return as_utc(value)


def range_start(range_key: str, now: datetime) -> datetime:
    if range_key in TIME_RANGES:
        return now - timedelta(days=TIME_RANGES[range_key])
    if range_key == "1y":
        try:
            start = now.replace(year=now.year - 1)
        except ValueError:
            # Feb 29
            start = now.replace(year=now.year - 1, day=28)
        return start.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime(1970, 1, 1, tzinfo=timezone.utc)


def filter_by_time_range(items: list[dict], range_key: str, now: datetime) -> list[dict]:
    start = range_start(range_key, now)
    out = []
    for item in items:
        created = _created(item)
        if created is not None and created >= start:
            out.append(item)
    return out


def last_month_bounds(now: datetime) -> tuple[datetime, datetime]:
    """First instant of the previous calendar month, first instant of this one."""
    this_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    prev_month = (this_month - timedelta(days=1)).replace(day=1)
    return prev_month, this_month


def filter_last_month(items: list[dict], now: datetime) -> list[dict]:
    start, end = last_month_bounds(now)
    out = []
    for item in items:
        created = _created(item)
        if created is not None and start <= created < end:
            out.append(item)
    return out


def calc_change(current: int, last: int) -> int:
    if last > 0:
        return round((current - last) / last * 100)
    return 100 if current > 0 else 0


def _metric(title: str, current: int, last: int, icon: str) -> dict:
    return {
        "title": title,
        "value": str(current),
        "change": f"{calc_change(current, last)}% from last month",
        "changeType": "positive" if current >= last else "negative",
        "icon": icon,
    }


def _with_status(items: list[dict], status: str) -> list[dict]:
    return [p for p in items if p.get("status") == status]


def build_report(properties: list[dict], leads: list[dict], range_key: str, now: datetime | None = None) -> dict:
    now = as_utc(now) or datetime.now(timezone.utc)
    props = filter_by_time_range(properties, range_key, now)
    period_leads = filter_by_time_range(leads, range_key, now)
    props_last = filter_last_month(properties, now)
    leads_last = filter_last_month(leads, now)

    metrics = [
        _metric("Total Properties", len(props), len(props_last), "🏠"),
        _metric("Total Leads", len(period_leads), len(leads_last), "📋"),
        _metric("Sold Properties", len(_with_status(props, "sold")), len(_with_status(props_last, "sold")), "✅"),
        _metric("Rented Properties", len(_with_status(props, "rented")), len(_with_status(props_last, "rented")), "🏘️"),
    ]

    # distributions cover every property, not just the selected range
    property_type_data = [
        {"label": "Buy", "value": len(_with_status(properties, "for-sale"))},
        {"label": "Rent", "value": len(_with_status(properties, "for-rent"))},
    ]
    by_location: "OrderedDict[str, int]" = OrderedDict()
    for p in properties:
        loc = p.get("location") or "Unknown"
        by_location[loc] = by_location.get(loc, 0) + 1
    location_data = [{"label": loc, "value": count} for loc, count in by_location.items()]

    return {
        "range": range_key,
        "metrics": metrics,
        "propertyTypeData": property_type_data,
        "locationData": location_data,
    }


def build_dashboard(properties: list[dict], leads: list[dict]) -> dict:
    def count(items, **match):
        return sum(1 for i in items if all(i.get(k) == v for k, v in match.items()))

    return {
        "totalLeads": len(leads),
        "newLeads": count(leads, status="new"),
        "contactedLeads": count(leads, status="contacted"),
        "closedLeads": count(leads, status="closed"),
        "highPriorityLeads": count(leads, priority="high"),
        "totalProperties": len(properties),
        "featuredProperties": count(properties, featured=True),
    }
