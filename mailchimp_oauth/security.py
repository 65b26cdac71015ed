"""Signing of the OAuth state parameter and the session cookie using itsdangerous."""
import secrets
from typing import Any
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from .config import MailchimpSettings


STATE_SALT = "mailchimp-oauth-state"
SESSION_SALT = "mailchimp-session"


def _serializer(settings: MailchimpSettings) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(settings.secret_key)


def sign_state(settings: MailchimpSettings) -> str:
    """Create a signed random nonce for the OAuth ``state`` parameter.
    
    The same value goes into the consent URL and into the state cookie of the
    browser that started the flow; verify_state requires both to match.
    """
    return _serializer(settings).dumps(secrets.token_urlsafe(16), salt=STATE_SALT)


def _load_state(settings: MailchimpSettings, signed_state: str) -> str | None:
    try:
        return _serializer(settings).loads(
            signed_state, salt=STATE_SALT, max_age=settings.state_max_age
        )
    except (BadSignature, SignatureExpired):
        return None


def verify_state(
    settings: MailchimpSettings,
    state: str | None,
    cookie_state: str | None,
) -> bool:
    """Check a returned ``state`` against the state cookie set by the login route.
    
    Both must be unexpired sign_state values carrying the same nonce.
    """
    if not state or not cookie_state:
        return False
    
    nonce = _load_state(settings, state)
    expected = _load_state(settings, cookie_state)
    if nonce is None or expected is None:
        return False
    return secrets.compare_digest(nonce, expected)


def sign_session(settings: MailchimpSettings, access_token: str, data_center: str) -> str:
    """Sign the access token and data center for storage in a cookie."""
    return _serializer(settings).dumps(
        {"access_token": access_token, "dc": data_center},
        salt=SESSION_SALT,
    )


def verify_session(settings: MailchimpSettings, signed_session: str) -> dict[str, Any] | None:
    """Load the ``{"access_token", "dc"}`` session written by sign_session.
    
    Sessions older than ``cookie_max_age``, signed with another key or
    tampered with yield None.
    """
    try:
        return _serializer(settings).loads(
            signed_session,
            salt=SESSION_SALT,
            max_age=settings.cookie_max_age,
        )
    except (BadSignature, SignatureExpired):
        return None
