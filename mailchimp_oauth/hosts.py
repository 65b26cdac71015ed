"""Base URL resolution for the login and data-center scoped API hosts."""
from dataclasses import dataclass
from .config import MailchimpSettings
from .errors import MissingDataCenterError


DATA_CENTER_PLACEHOLDER = "<dc>"


@dataclass(frozen=True)
class LoginHost:
    """The OAuth host (authorize, token and metadata endpoints)."""


@dataclass(frozen=True)
class ApiHost:
    """The Marketing API host of one data center."""
    data_center: str | None


Host = LoginHost | ApiHost

LOGIN = LoginHost()


def resolve_host(host: Host, settings: MailchimpSettings) -> str:
    """Return the fully resolved base URL for a host.
    
    Raises:
        MissingDataCenterError: if an API host has no data center
    """
    if isinstance(host, LoginHost):
        return settings.login_host
    
    if not host.data_center:
        raise MissingDataCenterError()
    
    return settings.api_host_template.replace(DATA_CENTER_PLACEHOLDER, host.data_center)
