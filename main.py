import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_cors_origins
from app.core.logging_config import setup_logging
from app.db.session import engine, Base
from app.models import User, Amenity, Property, Lead, ContactSubmission, PressRelease, SiteSettings  # noqa: F401
from app.api.auth import router as auth_router
from app.api.properties import router as properties_router
from app.api.agents import router as agents_router
from app.api.leads import router as leads_router
from app.api.contact import router as contact_router
from app.api.settings import router as settings_router
from app.api.amenities import router as amenities_router
from app.api.press_releases import router as press_releases_router
from app.api.analytics import router as analytics_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="BNR Homes API")


@app.middleware("http")
async def add_noindex_header(request: Request, call_next):
    """Keep search engines off the API host."""
    response = await call_next(request)
    response.headers["X-Robots-Tag"] = "noindex, nofollow"
    return response


@app.get("/robots.txt", include_in_schema=False)
async def robots_txt():
    return Response(
        content="User-agent: *\nDisallow: /\n",
        media_type="text/plain",
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create tables
Base.metadata.create_all(bind=engine)

app.include_router(auth_router)
app.include_router(properties_router)
app.include_router(agents_router)
app.include_router(leads_router)
app.include_router(contact_router)
app.include_router(settings_router)
app.include_router(amenities_router)
app.include_router(press_releases_router)
app.include_router(analytics_router)


@app.get("/")
def root():
    return {"message": "BNR Homes API is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
