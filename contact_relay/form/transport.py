"""Transport adapters that deliver a contact form payload to a mail backend"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol, Union
import httpx
import logging

logger = logging.getLogger(__name__)

SubmissionPayload = Dict[str, str]


class TransportKind(str, Enum):
    """Which mail sender the contact form uses"""
    RELAY_SCRIPT = "relay_script"
    HTTP_POST = "http_post"


@dataclass(frozen=True)
class Success:
    """Payload was accepted by the backend"""
    data: Optional[dict] = None


@dataclass(frozen=True)
class Failure:
    """Payload was not delivered"""
    reason: str


SubmissionOutcome = Union[Success, Failure]


class MailSender(Protocol):
    """Capability shared by every transport strategy"""

    async def send(self, payload: SubmissionPayload) -> SubmissionOutcome:
        ...


class HttpPostTransport:
    """POST the payload as JSON to the mail relay endpoint"""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def send(self, payload: SubmissionPayload) -> SubmissionOutcome:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    headers={"Content-Type": "application/json"},
                    json=payload
                )

            if not response.is_success:
                logger.warning(f"Mail relay rejected submission: {response.status_code} - {response.text}")
                return Failure("request failed")

            return Success(data=response.json())

        except httpx.HTTPError as e:
            logger.error(f"Mail relay request error: {e}")
            return Failure(str(e))
        except ValueError as e:
            logger.error(f"Mail relay returned invalid JSON: {e}")
            return Failure("invalid response")


class RelayScriptTransport:
    """
    Send through the EmailJS relay service.

    The hosted relay fills a mail template from the submitted fields, so the
    payload keys are mapped onto the template parameter names.
    """

    def __init__(
        self,
        service_id: str,
        template_id: str,
        public_key: str,
        to_email: str,
        api_url: str = "https://api.emailjs.com/api/v1.0/email/send",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.to_email = to_email
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def template_params(self, payload: SubmissionPayload) -> Dict[str, str]:
        return {
            "from_name": payload.get("name", ""),
            "from_email": payload.get("email", ""),
            "phone": payload.get("phone", ""),
            "inquiry_type": payload.get("inquiryType", ""),
            "message": payload.get("message", ""),
            "to_email": self.to_email
        }

    async def send(self, payload: SubmissionPayload) -> SubmissionOutcome:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    json={
                        "service_id": self.service_id,
                        "template_id": self.template_id,
                        "user_id": self.public_key,
                        "template_params": self.template_params(payload)
                    }
                )

            if not response.is_success:
                logger.warning(f"Relay service rejected submission: {response.status_code} - {response.text}")
                return Failure("relay rejected")

            return Success()

        except httpx.HTTPError as e:
            logger.error(f"Relay service error: {e}")
            return Failure(str(e))


def build_transport(settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> MailSender:
    """
    Build the mail sender selected in configuration

    Args:
        settings: Application settings
        transport: Optional httpx transport (used for in-process delivery)

    Returns:
        The configured MailSender
    """
    kind = TransportKind(settings.form_transport)

    if kind == TransportKind.RELAY_SCRIPT:
        return RelayScriptTransport(
            service_id=settings.emailjs_service_id,
            template_id=settings.emailjs_template_id,
            public_key=settings.emailjs_public_key,
            to_email=settings.emailjs_to_email,
            api_url=settings.emailjs_api_url,
            timeout=settings.request_timeout,
            transport=transport
        )

    return HttpPostTransport(
        url=settings.relay_url,
        timeout=settings.request_timeout,
        transport=transport
    )
