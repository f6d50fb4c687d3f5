"""Main FastAPI application"""
from fastapi import FastAPI
from contact_relay.config import get_settings
from contact_relay.middleware.cors import setup_cors
from contact_relay.middleware.error_handler import setup_error_handlers
from contact_relay.services.mail_service import build_mailer
from contextlib import asynccontextmanager
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup: fail fast on a misconfigured mail backend
    settings = get_settings()
    build_mailer(settings)
    logger.info(f"Mail relay ready - backend={settings.mail_backend}, recipient={settings.mail_to}")
    yield
    logger.info("Mail relay stopped")


# Create FastAPI app with lifespan
app = FastAPI(
    title="JRB Industries Contact API",
    description="Contact form mail relay and site content API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add error handling middleware and handlers
setup_error_handlers(app)

# Setup CORS (added last so it wraps error responses too)
setup_cors(app)

# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "contact-relay", "mail_backend": get_settings().mail_backend}

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "JRB Industries Contact API",
        "version": "1.0.0",
        "docs": "/docs"
    }

# Import and include routers
from contact_relay.routers import contact, catalog

app.include_router(contact.router, prefix="/sendmail", tags=["Contact"])
app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
app.include_router(catalog.router, prefix="/api", tags=["Catalog"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
