from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.press_release import PressRelease
from app.api.deps import get_admin_from_token
from app.api.serializers import press_release_out
from app.schemas.press_release import PressReleaseCreateRequest, PressReleaseUpdateRequest

router = APIRouter(prefix="/api", tags=["Press Releases"])


def _get_press_release(db: Session, press_id: int) -> PressRelease:
    press = db.query(PressRelease).filter(PressRelease.id == press_id).first()
    if not press:
        raise HTTPException(status_code=404, detail="Not found")
    return press


@router.get("/press-releases")
def list_press_releases(db: Session = Depends(get_db)):
    rows = db.query(PressRelease).order_by(PressRelease.created_at.desc(), PressRelease.id.desc()).all()
    return {"success": True, "data": [press_release_out(p) for p in rows]}


@router.get("/press-releases/{press_id}")
def get_press_release(press_id: int, db: Session = Depends(get_db)):
    return {"success": True, "data": press_release_out(_get_press_release(db, press_id))}


@router.post("/press-releases", status_code=201)
def create_press_release(
    data: PressReleaseCreateRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    columns = data.to_columns()
    if columns.get("date") is None:
        columns.pop("date", None)
    press = PressRelease(**columns)
    db.add(press)
    db.commit()
    db.refresh(press)
    return {"success": True, "data": press_release_out(press)}


@router.put("/press-releases/{press_id}")
def update_press_release(
    press_id: int,
    data: PressReleaseUpdateRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    press = _get_press_release(db, press_id)
    for key, value in data.to_columns().items():
        if value is not None:
            setattr(press, key, value)
    db.commit()
    db.refresh(press)
    return {"success": True, "data": press_release_out(press)}


@router.delete("/press-releases/{press_id}")
def delete_press_release(press_id: int, db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    press = _get_press_release(db, press_id)
    db.delete(press)
    db.commit()
    return {"success": True, "message": "Deleted successfully"}
