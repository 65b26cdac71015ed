"""Client for the Mailchimp Marketing API and its OAuth2 authorization flow."""
from .client import MailchimpClient, TokenResult
from .config import MailchimpSettings, get_settings
from .errors import DecodeError, MailchimpError, MissingDataCenterError, MissingFieldError
from .hosts import LOGIN, ApiHost, Host, LoginHost, resolve_host

__all__ = [
    "ApiHost",
    "DecodeError",
    "Host",
    "LOGIN",
    "LoginHost",
    "MailchimpClient",
    "MailchimpError",
    "MailchimpSettings",
    "MissingDataCenterError",
    "MissingFieldError",
    "TokenResult",
    "get_settings",
    "resolve_host",
]
