"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

from contact_relay.form.transport import TransportKind


class Settings(BaseSettings):
    """Application settings"""

    # Application
    environment: str = "development"
    cors_origins: list[str] = ["*"]
    site_name: str = "JRB Industries"

    # Mail relay
    mail_to: str = "contact@jrbindustries.com"
    mail_from: Optional[str] = None  # Falls back to the submitter's address
    mail_backend: str = "smtp"  # smtp | resend

    # SMTP backend (host's outbound mail relay)
    smtp_host: str = "localhost"
    smtp_port: int = 25
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = False
    smtp_timeout: float = 30.0

    # Resend backend
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"

    # Contact form client
    form_transport: TransportKind = TransportKind.HTTP_POST
    relay_url: str = "http://localhost:8000/sendmail"
    request_timeout: float = 30.0

    # EmailJS relay (used when form_transport == relay_script)
    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"
    emailjs_service_id: str = ""
    emailjs_template_id: str = ""
    emailjs_public_key: str = ""
    emailjs_to_email: str = "contact@jrbindustries.com"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
