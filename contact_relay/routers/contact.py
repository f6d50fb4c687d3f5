"""Contact form mail relay endpoint"""
from fastapi import APIRouter, Depends, HTTPException, Request
import logging

from contact_relay.config import Settings, get_settings
from contact_relay.models.contact import ContactResponse, ContactSubmission, ErrorResponse
from contact_relay.services.mail_service import (
    Mailer,
    compose_email,
    get_mailer,
    is_valid_email,
    missing_field
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def read_submission(request: Request) -> ContactSubmission:
    """Parse the JSON body leniently; anything unusable counts as empty fields"""
    try:
        data = await request.json()
    except ValueError:
        data = None

    if not isinstance(data, dict):
        data = {}

    return ContactSubmission.model_validate(data)


@router.post(
    "",
    response_model=ContactResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)
async def send_mail(
    form: ContactSubmission = Depends(read_submission),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings)
):
    """Relay a contact form submission by email (PUBLIC endpoint)"""
    field = missing_field(form)
    if field:
        raise HTTPException(status_code=400, detail=f"Field '{field}' is required")

    if not is_valid_email(form.email.strip()):
        raise HTTPException(status_code=400, detail="Invalid email address")

    try:
        email = compose_email(form, settings)
        delivered = await mailer.deliver(email)
    except Exception as e:
        logger.error(f"Contact relay error: {e}")
        delivered = False

    if not delivered:
        raise HTTPException(status_code=500, detail="Failed to send email")

    logger.info(f"Relayed contact inquiry ({email.subject})")
    return ContactResponse()
