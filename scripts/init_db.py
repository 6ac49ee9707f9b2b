"""Seed a super admin, two agents, sample properties, amenities, site settings and leads."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.session import SessionLocal, engine, Base
from app.models import User, Amenity, Property, Lead, SiteSettings
from app.core.security import hash_password
from app.services.property_form import compute_price_per_sqft

Base.metadata.create_all(bind=engine)
db = SessionLocal()

# Default super admin: admin@bnrhomes.com / password123
admin = db.query(User).filter(User.role == "super_admin").first()
if not admin:
    admin = User(
        name="Super Admin",
        email="admin@bnrhomes.com",
        phone="+91 90000 00000",
        password_hash=hash_password("password123"),
        role="super_admin",
        status="active",
    )
    db.add(admin)
    db.commit()
    print("Created super admin: admin@bnrhomes.com / password123")

agents = db.query(User).filter(User.role == "agent").order_by(User.id).all()
if not agents:
    agents = [
        User(
            name="Sarah Johnson",
            email="sarah@bnrhomes.com",
            phone="+91 90000 12345",
            password_hash=hash_password("password123"),
            role="agent",
            status="active",
            agent_info={
                "specialties": ["Luxury Properties", "Commercial Real Estate"],
                "experience": "5 years",
                "languages": ["English", "Hindi"],
                "bio": "Experienced agent specializing in luxury properties.",
            },
        ),
        User(
            name="Michael Chen",
            email="michael@bnrhomes.com",
            phone="+91 90000 98765",
            password_hash=hash_password("password123"),
            role="agent",
            status="active",
            agent_info={
                "specialties": ["Residential Properties", "First-time Buyers"],
                "experience": "3 years",
                "languages": ["English", "Telugu"],
                "bio": "Helps first-time buyers find their dream homes.",
            },
        ),
    ]
    db.add_all(agents)
    db.commit()
    print("Created agents: sarah@bnrhomes.com, michael@bnrhomes.com / password123")

if not db.query(Amenity).first():
    for title, category in [
        ("Swimming Pool", "recreational"),
        ("Gymnasium", "indoor"),
        ("Children's Play Area", "outdoor"),
        ("24x7 Security", "safety"),
        ("Power Backup", "convenience"),
    ]:
        db.add(Amenity(title=title, category=category, is_active=True))
    db.commit()
    print("Created amenities")

if not db.query(Property).first():
    apartment = Property(
        title="Modern Luxury Apartment",
        description="Modern apartment with city views and premium amenities.",
        price=8500000,
        location="Gachibowli, Hyderabad",
        city="Hyderabad",
        area=1200,
        type="apartment",
        status="for-sale",
        images=["/modern-apartment-aerial.png"],
        featured=True,
        possession="Ready to move",
        apartment_details={"bhkType": "3bhk", "bedrooms": 3, "bathrooms": 2},
    )
    villa = Property(
        title="Independent Garden Villa",
        description="Independent villa in a gated community.",
        price=45000,
        location="Kokapet, Hyderabad",
        city="Hyderabad",
        area=2400,
        type="villa",
        status="for-rent",
        images=["/premium-housing-complex.jpg"],
        possession="Dec 2027",
        villa_details={
            "villaType": "independent",
            "plotArea": 3000,
            "builtUpArea": 2400,
            "bedrooms": 4,
            "bathrooms": 4,
            "gatedCommunity": True,
        },
    )
    for prop in (apartment, villa):
        prop.price_per_sqft = compute_price_per_sqft(prop.price, prop.area)
    apartment.amenities = db.query(Amenity).all()
    apartment.assigned_agents = agents[:1]
    villa.assigned_agents = agents[1:]
    db.add_all([apartment, villa])
    db.commit()
    print("Created properties")

if not db.query(SiteSettings).first():
    db.add(SiteSettings(
        site_name="BNRHomes",
        site_description="Your trusted real estate partner",
        contact_email="info@bnrhomes.com",
        contact_phone="+91 90000 12345",
        address="Hyderabad, Telangana",
        social_media={"facebook": "", "twitter": "", "instagram": "", "linkedin": ""},
        hero_title="Find Your Dream Property",
        hero_subtitle="Discover the perfect home with expert guidance.",
        about_text="We help you find your perfect property.",
        services_text="Property sales, rentals and investment consulting.",
    ))
    db.commit()
    print("Created site settings")

if not db.query(Lead).first():
    first = db.query(Property).order_by(Property.id).first()
    lead = Lead(
        name="John Smith",
        email="john.smith@email.com",
        phone="+91 98888 11111",
        message="Interested in the luxury apartment",
        source="website",
        status="new",
        priority="high",
        property_id=first.id if first else None,
        notes=[],
    )
    lead.assigned_agents = list(first.assigned_agents) if first else []
    db.add(lead)
    db.commit()
    print("Created sample lead")

db.close()
print("Init complete.")
