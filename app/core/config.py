"""Central config. Values come from .env, defaults only here."""
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL") or "sqlite:///./bnrhomes.db"

JWT_SECRET = os.getenv("JWT_SECRET") or "fallback-secret-key"
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "7"))
RESET_TOKEN_EXPIRE_MINUTES = int(os.getenv("RESET_TOKEN_EXPIRE_MINUTES", "15"))

SITE_URL = (os.getenv("SITE_URL") or "http://localhost:3000").rstrip("/")

SMTP_HOST = os.getenv("SMTP_HOST") or "smtp.gmail.com"
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER = os.getenv("SMTP_USER")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
CONTACT_EMAIL = os.getenv("CONTACT_EMAIL") or SMTP_USER

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()


def get_cors_origins() -> list[str]:
    """Comma separated CORS_ORIGINS, '*' when unset."""
    raw = (os.getenv("CORS_ORIGINS") or "").strip()
    if not raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]
