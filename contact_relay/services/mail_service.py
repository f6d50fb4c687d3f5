"""Mail relay service: compose contact emails and hand them to a mail backend"""
from datetime import datetime
from email.message import EmailMessage
from typing import Optional, Protocol
import logging

import aiosmtplib
import httpx
from bs4 import BeautifulSoup
from email_validator import validate_email, EmailNotValidError

from contact_relay.config import Settings, get_settings
from contact_relay.models.contact import ContactSubmission, OutgoingEmail

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["name", "email", "message"]
DEFAULT_INQUIRY_TYPE = "General Inquiry"

EMAIL_TEMPLATE = """
New contact form submission from {site_name} website:

Name: {name}
Email: {email}
Phone: {phone}
Inquiry Type: {inquiry_type}

Message:
{message}

---
Sent from: {site_name} Website Contact Form
Time: {timestamp}
"""


def strip_tags(value: str) -> str:
    """Drop any HTML markup from a submitted string"""
    if not value:
        return ""
    return BeautifulSoup(value, "html.parser").get_text()


def missing_field(form: ContactSubmission) -> Optional[str]:
    """Return the first required field left empty, if any"""
    for field in REQUIRED_FIELDS:
        if not getattr(form, field).strip():
            return field
    return None


def is_valid_email(address: str) -> bool:
    try:
        validate_email(address, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def compose_email(
    form: ContactSubmission,
    settings: Settings,
    now: Optional[datetime] = None
) -> OutgoingEmail:
    """
    Build the plain-text notification email for a submission

    Args:
        form: Validated contact submission
        settings: Application settings (recipient, sender, site name)
        now: Timestamp to stamp the email with

    Returns:
        OutgoingEmail ready for delivery
    """
    name = strip_tags(form.name)
    email = form.email.strip()
    phone = strip_tags(form.phone)
    inquiry_type = strip_tags(form.inquiry_type) if form.inquiry_type is not None else DEFAULT_INQUIRY_TYPE
    message = strip_tags(form.message)
    timestamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")

    body = EMAIL_TEMPLATE.format(
        site_name=settings.site_name,
        name=name,
        email=email,
        phone=phone,
        inquiry_type=inquiry_type,
        message=message,
        timestamp=timestamp
    )

    return OutgoingEmail(
        to_email=settings.mail_to,
        from_email=settings.mail_from or email,
        reply_to=email,
        subject=f"New Inquiry from {settings.site_name} Website - {inquiry_type}",
        body=body
    )


class Mailer(Protocol):
    async def deliver(self, email: OutgoingEmail) -> bool:
        ...


class SmtpMailer:
    """Deliver through the host's outbound SMTP relay"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_message(self, email: OutgoingEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = email.from_email
        message["To"] = email.to_email
        message["Reply-To"] = email.reply_to
        message["Subject"] = email.subject
        message.set_content(email.body, charset="utf-8")
        return message

    async def deliver(self, email: OutgoingEmail) -> bool:
        try:
            await aiosmtplib.send(
                self.build_message(email),
                hostname=self.settings.smtp_host,
                port=self.settings.smtp_port,
                username=self.settings.smtp_username,
                password=self.settings.smtp_password,
                start_tls=self.settings.smtp_use_tls,
                timeout=self.settings.smtp_timeout
            )
            logger.info(f"Contact email sent to {email.to_email} via SMTP")
            return True
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP delivery failed: {e}")
            return False


class ResendMailer:
    """Deliver through the Resend HTTP API"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    async def deliver(self, email: OutgoingEmail) -> bool:
        try:
            async with httpx.AsyncClient(timeout=30.0, transport=self._transport) as client:
                response = await client.post(
                    self.settings.resend_api_url,
                    headers={
                        "Authorization": f"Bearer {self.settings.resend_api_key}",
                        "Content-Type": "application/json"
                    },
                    json={
                        "from": email.from_email,
                        "to": [email.to_email],
                        "reply_to": email.reply_to,
                        "subject": email.subject,
                        "text": email.body
                    }
                )

            if response.status_code == 200:
                logger.info(f"Contact email sent to {email.to_email} via Resend")
                return True

            logger.error(f"Failed to send email: {response.status_code} - {response.text}")
            return False

        except httpx.HTTPError as e:
            logger.error(f"Email error: {e}")
            return False


def build_mailer(settings: Settings) -> Mailer:
    """Select the mail backend named in configuration"""
    backend = settings.mail_backend.lower()
    if backend == "resend":
        return ResendMailer(settings)
    if backend == "smtp":
        return SmtpMailer(settings)
    raise ValueError(f"Unknown mail backend: {settings.mail_backend}")


def get_mailer() -> Mailer:
    """FastAPI dependency returning the configured mailer"""
    return build_mailer(get_settings())
