"""Contact form Pydantic models"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional


class ContactSubmission(BaseModel):
    """Contact form submission as posted by the site"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    inquiry_type: Optional[str] = Field(None, alias="inquiryType")
    message: str = ""

    @field_validator("name", "email", "phone", "message", mode="before")
    @classmethod
    def text_or_empty(cls, value: Any) -> str:
        # Anything that is not a string counts as an empty field
        return value if isinstance(value, str) else ""

    @field_validator("inquiry_type", mode="before")
    @classmethod
    def optional_text(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class ContactResponse(BaseModel):
    """Successful relay response"""
    success: bool = True
    message: str = "Email sent successfully"


class ErrorResponse(BaseModel):
    """Error body returned by the relay"""
    error: str


class OutgoingEmail(BaseModel):
    """Plain-text email composed from a submission"""
    to_email: str
    from_email: str
    reply_to: str
    subject: str
    body: str
