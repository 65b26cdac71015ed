"""FastAPI application exposing the Mailchimp OAuth routes."""
import httpx
from fastapi import FastAPI
from .client import MailchimpClient
from .config import MailchimpSettings, get_settings
from . import auth


def create_app(
    settings: MailchimpSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Create the app with one MailchimpClient bound to ``settings``."""
    settings = settings or get_settings()
    
    app = FastAPI(
        title="Mailchimp OAuth",
        description="Connects a Mailchimp account through the OAuth2 authorization-code flow",
        version="1.0.0",
    )
    app.state.mailchimp = MailchimpClient(settings, transport=transport)
    
    # Mount routers
    app.include_router(auth.router)
    
    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "ok"}
    
    return app
