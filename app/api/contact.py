import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core import config
from app.core.mailer import send_mail, MailError
from app.db.session import get_db
from app.models.contact import ContactSubmission, CONTACT_STATUSES
from app.models.lead import Lead
from app.models.property import Property
from app.api.deps import get_admin_from_token
from app.api.serializers import contact_out
from app.schemas.contact import ContactSubmitRequest, ContactStatusRequest, GeneralEnquiryRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Contact"])


@router.get("/contact")
def list_submissions(db: Session = Depends(get_db), admin=Depends(get_admin_from_token)):
    rows = db.query(ContactSubmission).order_by(ContactSubmission.created_at.desc(), ContactSubmission.id.desc()).all()
    return [contact_out(c) for c in rows]


@router.post("/contact", status_code=201)
def submit_contact(data: ContactSubmitRequest, db: Session = Depends(get_db)):
    if not data.name or not data.email or not data.message:
        raise HTTPException(status_code=400, detail="Name, email, and message are required.")

    prop = None
    if data.property_id is not None:
        prop = db.query(Property).filter(Property.id == data.property_id).first()
        if not prop:
            raise HTTPException(status_code=404, detail="Property not found.")

    submission = ContactSubmission(
        name=data.name,
        email=data.email,
        phone=data.phone,
        message=data.message,
        property_id=prop.id if prop else None,
        status="new",
    )
    db.add(submission)
    db.commit()
    db.refresh(submission)

    # every inquiry also becomes a lead; a failure here must not lose the submission
    try:
        lead = Lead(
            name=data.name,
            email=data.email,
            phone=data.phone,
            message=data.message,
            property_id=prop.id if prop else None,
            status="new",
            priority="low",
            source="property_contact_form" if prop else "general_contact_form",
            notes=[],
        )
        lead.assigned_agents = list(prop.assigned_agents) if prop else []
        db.add(lead)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Lead creation failed for contact submission %s", submission.id)

    return {"message": "Contact form submitted successfully.", "data": contact_out(submission)}


@router.patch("/contact/{submission_id}")
def update_submission_status(
    submission_id: int,
    data: ContactStatusRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_admin_from_token),
):
    if data.status not in CONTACT_STATUSES:
        raise HTTPException(status_code=400, detail="Invalid status")
    submission = db.query(ContactSubmission).filter(ContactSubmission.id == submission_id).first()
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    submission.status = data.status
    db.commit()
    db.refresh(submission)
    return contact_out(submission)


@router.post("/general-enquiry")
def general_enquiry(data: GeneralEnquiryRequest):
    body = (
        "New enquiry received from BNR Homes contact form:\n\n"
        f"Name: {data.name}\n"
        f"Email: {data.email}\n"
        f"Phone: {data.phone}\n\n"
        f"Message:\n{data.message}\n"
    )
    try:
        send_mail(
            config.CONTACT_EMAIL,
            data.subject or "New Enquiry Form Submission",
            body,
            reply_to=data.email,
        )
    except MailError:
        logger.exception("Error sending general enquiry from %s", data.email)
        raise HTTPException(status_code=500, detail="Failed to send mail")
    return {"success": True, "message": "Mail sent successfully"}
