"""FastAPI dependencies for the Mailchimp OAuth routes."""
from fastapi import Depends, HTTPException, Request, status
from typing import Annotated, Any
from .client import MailchimpClient
from .config import MailchimpSettings
from .security import verify_session


def get_client(request: Request) -> MailchimpClient:
    """Return the client created by create_app."""
    return request.app.state.mailchimp


def get_app_settings(
    client: Annotated[MailchimpClient, Depends(get_client)],
) -> MailchimpSettings:
    return client.settings


def get_current_session(
    request: Request,
    settings: Annotated[MailchimpSettings, Depends(get_app_settings)],
) -> dict[str, Any]:
    """Extract and verify the Mailchimp session from the signed cookie.
    
    Raises:
        HTTPException: 401 if cookie is missing or invalid
        
    Returns:
        Dict with the ``access_token`` and ``dc`` of the connected account
    """
    signed_session = request.cookies.get(settings.cookie_name)
    
    if not signed_session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    
    session = verify_session(settings, signed_session)
    
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session"
        )
    
    return session
