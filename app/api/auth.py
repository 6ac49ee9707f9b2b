import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core import config
from app.core.mailer import send_mail, MailError
from app.core.security import hash_password, verify_password, create_token, decode_token
from app.db.session import get_db
from app.models.user import User, USER_ROLES
from app.models.timestamps import utcnow
from app.api.deps import get_current_user
from app.api.serializers import user_out
from app.schemas.auth import LoginRequest, RegisterRequest, ForgotPasswordRequest, ResetPasswordRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

MIN_PASSWORD_LENGTH = 8


def _token_for(user: User, expires_delta: timedelta | None = None) -> str:
    return create_token({"sub": str(user.id), "email": user.email, "role": user.role}, expires_delta)


@router.post("/login")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    if not data.email or not data.password:
        raise HTTPException(status_code=400, detail="Email and password are required")
    user = db.query(User).filter(User.email == data.email).first()
    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    if user.status != "active":
        raise HTTPException(status_code=401, detail="Account is inactive or suspended")
    if not verify_password(data.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    user.last_login = utcnow()
    db.commit()
    db.refresh(user)
    return {
        "success": True,
        "user": user_out(user),
        "token": _token_for(user),
        "message": "Login successful",
    }


@router.post("/register", status_code=201)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    if not all([data.name, data.email, data.phone, data.password, data.role]):
        raise HTTPException(status_code=400, detail="All fields are required")
    if len(data.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(status_code=400, detail="Password must be at least 8 characters long")
    if data.role not in USER_ROLES:
        raise HTTPException(status_code=400, detail="Invalid role specified")
    if db.query(User).filter(User.email == data.email).first():
        raise HTTPException(status_code=409, detail="User with this email already exists")
    user = User(
        name=data.name,
        email=data.email,
        phone=data.phone,
        password_hash=hash_password(data.password),
        role=data.role,
        status="active",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.email, user.role)
    return {
        "success": True,
        "user": user_out(user),
        "token": _token_for(user),
        "message": "User registered successfully",
    }


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return {"success": True, "user": user_out(user)}


@router.post("/logout")
def logout():
    # tokens are stateless; the client drops its copy
    return {"success": True, "message": "Logged out successfully"}


@router.get("/check-role")
def check_role(email: str | None = Query(None), db: Session = Depends(get_db)):
    if not email:
        raise HTTPException(status_code=400, detail="Email required")
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {"role": user.role}


@router.post("/forgot-password")
def forgot_password(data: ForgotPasswordRequest, db: Session = Depends(get_db)):
    if not data.email:
        raise HTTPException(status_code=400, detail="Email is required")
    user = db.query(User).filter(User.email == data.email).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if user.role != "super_admin":
        raise HTTPException(status_code=403, detail="Only super_admins can reset passwords")

    token = _token_for(user, timedelta(minutes=config.RESET_TOKEN_EXPIRE_MINUTES))
    reset_link = f"{config.SITE_URL}/reset-password?token={token}"
    try:
        send_mail(
            user.email,
            "Password Reset Request",
            f'<p>Click <a href="{reset_link}">here</a> to reset your password. '
            f"This link expires in {config.RESET_TOKEN_EXPIRE_MINUTES} minutes.</p>",
            html=True,
        )
    except MailError:
        logger.exception("Password reset mail to %s failed", user.email)
        raise HTTPException(status_code=500, detail="Server error")
    return {"success": True}


@router.post("/reset-password")
def reset_password(data: ResetPasswordRequest, db: Session = Depends(get_db)):
    if not data.token or not data.password:
        raise HTTPException(status_code=400, detail="Token and password required")
    payload = decode_token(data.token)
    if not payload or not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user = db.query(User).filter(User.id == int(payload["sub"])).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if user.role != "super_admin":
        raise HTTPException(status_code=403, detail="Only super_admin can reset password")
    user.password_hash = hash_password(data.password)
    db.commit()
    return {"success": True, "message": "Password updated successfully"}
