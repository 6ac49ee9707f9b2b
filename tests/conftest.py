import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import hash_password, create_token
from app.db.session import Base, get_db
from app.models import User, Property, Amenity
from main import app

engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "adminpass123"
AGENT_PASSWORD = "agentpass123"


def auth_headers(user: User) -> dict:
    token = create_token({"sub": str(user.id), "email": user.email, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def admin(db):
    user = User(
        name="Super Admin",
        email="admin@bnrhomes.com",
        phone="+91 90000 00000",
        password_hash=hash_password(ADMIN_PASSWORD),
        role="super_admin",
        status="active",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture()
def agent(db):
    user = User(
        name="Sarah Johnson",
        email="sarah@bnrhomes.com",
        phone="+91 90000 12345",
        password_hash=hash_password(AGENT_PASSWORD),
        role="agent",
        status="active",
        agent_info={"specialties": ["Luxury"], "experience": "5 years", "languages": ["English"]},
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def agent_headers(agent):
    return auth_headers(agent)


@pytest.fixture()
def amenity(db):
    row = Amenity(title="Swimming Pool", category="recreational", is_active=True)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture()
def apartment_payload():
    return {
        "title": "Skyline Residency",
        "description": "Lake facing 3BHK with clubhouse access.",
        "price": 8500000,
        "location": "Gachibowli, Hyderabad",
        "area": 1700,
        "type": "apartment",
        "status": "for-sale",
        "images": ["/skyline-1.jpg"],
        "featured": True,
        "possession": "Ready to move",
        "apartmentDetails": {"bhkType": "3bhk", "bedrooms": 3, "bathrooms": 3},
    }


@pytest.fixture()
def sample_property(db, agent):
    prop = Property(
        title="Garden Villa",
        description="Independent villa in a gated community.",
        price=45000,
        location="Kokapet, Hyderabad",
        area=2400,
        type="villa",
        status="for-rent",
        images=["/villa.jpg"],
        villa_details={
            "villaType": "independent",
            "plotArea": 3000,
            "builtUpArea": 2400,
            "bedrooms": 4,
            "bathrooms": 4,
        },
    )
    prop.assigned_agents = [agent]
    db.add(prop)
    db.commit()
    db.refresh(prop)
    return prop
