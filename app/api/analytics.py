from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.lead import Lead
from app.models.property import Property
from app.api.deps import get_admin_from_token
from app.api.serializers import lead_out, property_out
from app.services.analytics import build_report, build_dashboard

router = APIRouter(prefix="/api/admin", tags=["Admin - Analytics"])


def _all(db: Session):
    properties = [property_out(p, with_agents=False) for p in db.query(Property).all()]
    leads = [lead_out(L) for L in db.query(Lead).all()]
    return properties, leads


@router.get("/analytics")
def get_analytics(
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
    range_key: str = Query("30d", alias="range"),
):
    properties, leads = _all(db)
    return build_report(properties, leads, range_key)


@router.get("/dashboard")
def get_dashboard(db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    properties, leads = _all(db)
    return build_dashboard(properties, leads)
