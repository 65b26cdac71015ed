"""OAuth routes connecting a Mailchimp account to the host application."""
import logging
from fastapi import APIRouter, HTTPException, Request, Response, status, Depends
from fastapi.responses import RedirectResponse
from typing import Annotated, Any
from .client import MailchimpClient
from .config import MailchimpSettings
from .dependencies import get_app_settings, get_client, get_current_session
from .security import sign_session, sign_state, verify_state


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mailchimp", tags=["mailchimp"])


def _clear_cookie(response: Response, key: str) -> None:
    response.delete_cookie(key=key, httponly=True, secure=False, samesite="lax")


@router.get("/login")
def login(
    client: Annotated[MailchimpClient, Depends(get_client)],
    settings: Annotated[MailchimpSettings, Depends(get_app_settings)],
):
    """Redirect the browser to the Mailchimp consent screen.
    
    The state sent to Mailchimp is also kept in a short-lived cookie so the
    callback only accepts it from this browser.
    """
    state = sign_state(settings)
    url = client.get_login_url(
        redirect_uri=settings.redirect_uri,
        state=state,
    )
    response = RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.set_cookie(
        key=settings.state_cookie_name,
        value=state,
        max_age=settings.state_max_age,
        httponly=True,
        secure=False,  # Set to True in production with HTTPS
        samesite="lax",  # sent back on the redirect from Mailchimp
    )
    return response


@router.get("/callback")
def callback(
    request: Request,
    response: Response,
    client: Annotated[MailchimpClient, Depends(get_client)],
    settings: Annotated[MailchimpSettings, Depends(get_app_settings)],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Exchange the authorization code and store the session in a signed cookie.
    
    Returns the account metadata (without the access token).
    """
    # Mailchimp omits the code when the user declines access
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error or "Missing authorization code"
        )
    
    if not verify_state(settings, state, request.cookies.get(settings.state_cookie_name)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid or expired state"
        )
    
    # One state per login
    _clear_cookie(response, settings.state_cookie_name)
    
    result = client.request_token(code)
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.response.get("error_description")
            or result.response.get("error")
            or "Authorization code exchange failed"
        )
    
    account = client.get_account_details(result.access_token)
    data_center = account.get("dc")
    if not data_center:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Mailchimp metadata did not include a data center"
        )
    
    response.set_cookie(
        key=settings.cookie_name,
        value=sign_session(settings, result.access_token, data_center),
        max_age=settings.cookie_max_age,
        httponly=True,
        secure=False,  # Set to True in production with HTTPS
        samesite="lax",  # the callback is a cross-site navigation
    )
    logger.info("Connected Mailchimp account in data center %s", data_center)
    
    return {key: value for key, value in account.items() if key != "access_token"}


@router.post("/logout")
def logout(
    response: Response,
    settings: Annotated[MailchimpSettings, Depends(get_app_settings)],
):
    """Forget the connected account."""
    _clear_cookie(response, settings.cookie_name)
    return {"success": True}


@router.get("/me")
def me(
    session: Annotated[dict[str, Any], Depends(get_current_session)],
    client: Annotated[MailchimpClient, Depends(get_client)],
):
    """Get the connected account's info from the API root."""
    data = client.get("", {}, session["dc"], access_token=session["access_token"])
    
    # The API root has no "status" on success; error payloads carry it
    error_status = data.get("status")
    if isinstance(error_status, int) and error_status >= 400:
        raise HTTPException(
            status_code=error_status,
            detail=data.get("detail", "Failed to get account info")
        )
    
    return data
