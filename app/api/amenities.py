import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.amenity import Amenity
from app.api.deps import get_admin_from_token
from app.api.serializers import amenity_out
from app.schemas.amenity import AmenityCreateRequest, AmenityUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Amenities"])


def _get_amenity(db: Session, amenity_id: int) -> Amenity:
    amenity = db.query(Amenity).filter(Amenity.id == amenity_id).first()
    if not amenity:
        raise HTTPException(status_code=404, detail="Amenity not found")
    return amenity


@router.get("/amenities")
def list_amenities(db: Session = Depends(get_db)):
    rows = db.query(Amenity).order_by(Amenity.category, Amenity.id).all()
    return {"success": True, "data": [amenity_out(a) for a in rows]}


@router.post("/amenities", status_code=201)
def create_amenity(data: AmenityCreateRequest, db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    amenity = Amenity(title=data.title, category=data.category, image=data.image, is_active=data.is_active)
    db.add(amenity)
    db.commit()
    db.refresh(amenity)
    return {"success": True, "data": amenity_out(amenity)}


@router.put("/amenities/{amenity_id}")
def update_amenity(
    amenity_id: int,
    data: AmenityUpdateRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    amenity = _get_amenity(db, amenity_id)
    for key, value in data.to_columns().items():
        if value is not None:
            setattr(amenity, key, value)
    db.commit()
    db.refresh(amenity)
    return {"success": True, "data": amenity_out(amenity)}


@router.delete("/amenities/{amenity_id}")
def delete_amenity(amenity_id: int, db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    amenity = _get_amenity(db, amenity_id)
    db.delete(amenity)
    db.commit()
    return {"success": True, "message": "Amenity deleted successfully"}
