"""Contact form controller: validation display and the submission lifecycle"""
from typing import Dict, Iterable, Optional, Protocol
import httpx
import logging

from contact_relay.config import get_settings
from contact_relay.form.validators import Field, FieldKind, ValidationResult, validate
from contact_relay.form.transport import MailSender, Success, SubmissionPayload, build_transport
from contact_relay.form.presenter import (
    LoggingPresenter,
    NotificationKind,
    NotificationPresenter,
    Presenter,
    Scheduler
)

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Send Message"
LOADING_LABEL = "Sending..."

CORRECT_ERRORS_MESSAGE = "Please correct the errors above"
SUCCESS_MESSAGE = "Thank you! Your message has been sent successfully."
FAILURE_MESSAGE = "Sorry, there was an error sending your message. Please try again."


class FormView(Protocol):
    """Rendering target for inline field errors and the submit control"""

    def show_field_error(self, name: str, message: str) -> None:
        ...

    def clear_field_error(self, name: str) -> None:
        ...

    def set_submit_control(self, label: str, enabled: bool) -> None:
        ...


class FormDisplay:
    """In-memory form view tracking what a rendered form would show"""

    def __init__(self, submit_label: str = SUBMIT_LABEL):
        self.errors: Dict[str, str] = {}
        self.submit_label = submit_label
        self.submit_enabled = True

    def show_field_error(self, name: str, message: str) -> None:
        self.errors[name] = message

    def clear_field_error(self, name: str) -> None:
        self.errors.pop(name, None)

    def set_submit_control(self, label: str, enabled: bool) -> None:
        self.submit_label = label
        self.submit_enabled = enabled


def contact_fields() -> Dict[str, Field]:
    """Fields of the site's contact form, keyed by payload name"""
    fields = [
        Field("name", FieldKind.TEXT, required=True),
        Field("email", FieldKind.EMAIL, required=True),
        Field("phone", FieldKind.TELEPHONE),
        Field("inquiryType", FieldKind.SELECT),
        Field("message", FieldKind.TEXTAREA, required=True),
    ]
    return {field.name: field for field in fields}


class FormController:
    """
    Drives one contact form for a page session.

    The submit control moves Idle -> Submitting -> Idle. Only one submission
    may be in flight; further submit requests are ignored until it settles.
    """

    def __init__(
        self,
        transport: MailSender,
        notifications: NotificationPresenter,
        view: Optional[FormView] = None,
        fields: Optional[Iterable[Field]] = None,
        submit_label: str = SUBMIT_LABEL
    ):
        self.transport = transport
        self.notifications = notifications
        self.view = view if view is not None else FormDisplay(submit_label)
        self.fields = {f.name: f for f in fields} if fields is not None else contact_fields()
        self.submit_label = submit_label
        self.submitting = False

    def field(self, name: str) -> Field:
        try:
            return self.fields[name]
        except KeyError:
            raise KeyError(f"Unknown form field: {name}")

    def on_blur(self, name: str) -> ValidationResult:
        """Validate a field when it loses focus"""
        return self._check(self.field(name))

    def on_input(self, name: str, value: str) -> None:
        """Store new input and clear the field's error until the next blur"""
        field = self.field(name)
        field.value = value
        self.view.clear_field_error(field.name)

    def validate_all(self) -> bool:
        """Validate required and filled-in fields, surfacing all failures in one pass"""
        results = [self._check(f) for f in self.fields.values() if f.required or f.value.strip()]
        return all(result.valid for result in results)

    def payload(self) -> SubmissionPayload:
        return {name: field.value for name, field in self.fields.items()}

    async def submit(self) -> bool:
        """
        Validate and send the form.

        Returns:
            True if a transport call was made and succeeded
        """
        if self.submitting:
            logger.info("Submission already in flight, ignoring submit request")
            return False

        if not self.validate_all():
            self.notifications.show(CORRECT_ERRORS_MESSAGE, NotificationKind.ERROR)
            return False

        self.submitting = True
        self.view.set_submit_control(LOADING_LABEL, enabled=False)

        try:
            outcome = await self.transport.send(self.payload())

            if isinstance(outcome, Success):
                self.notifications.show(SUCCESS_MESSAGE, NotificationKind.SUCCESS)
                self.reset()
                return True

            logger.error(f"Error sending message: {outcome.reason}")
            self.notifications.show(FAILURE_MESSAGE, NotificationKind.ERROR)
            return False

        except Exception as e:
            logger.error(f"Error sending message: {e}")
            self.notifications.show(FAILURE_MESSAGE, NotificationKind.ERROR)
            return False

        finally:
            self.view.set_submit_control(self.submit_label, enabled=True)
            self.submitting = False

    def reset(self) -> None:
        """Clear every value and any shown validation error"""
        for field in self.fields.values():
            field.value = ""
            self.view.clear_field_error(field.name)

    def _check(self, field: Field) -> ValidationResult:
        result = validate(field)
        if result.valid:
            self.view.clear_field_error(field.name)
        else:
            self.view.show_field_error(field.name, result.message)
        return result


def create_form_controller(
    settings=None,
    target: Optional[Presenter] = None,
    view: Optional[FormView] = None,
    scheduler: Optional[Scheduler] = None,
    http_transport: Optional[httpx.AsyncBaseTransport] = None
) -> FormController:
    """
    Wire a controller for one page session from configuration

    Args:
        settings: Application settings, defaults to the cached settings
        target: Notification rendering target, defaults to the log
        view: Form view, defaults to an in-memory FormDisplay
        scheduler: Timer source for notifications
        http_transport: Optional httpx transport for the mail sender

    Returns:
        A ready FormController
    """
    settings = settings or get_settings()
    return FormController(
        transport=build_transport(settings, transport=http_transport),
        notifications=NotificationPresenter(target or LoggingPresenter(), scheduler),
        view=view
    )
