"""CORS middleware configuration"""
from fastapi.middleware.cors import CORSMiddleware
from contact_relay.config import get_settings

settings = get_settings()


def setup_cors(app):
    """
    Configure CORS middleware for the application.
    The site posts its contact form cross-origin as JSON.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )
