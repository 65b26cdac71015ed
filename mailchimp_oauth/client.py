"""HTTP client for the Mailchimp Marketing API and its OAuth2 flow."""
import logging
import httpx
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode
from .config import MailchimpSettings
from .errors import DecodeError, MissingFieldError
from .hosts import LOGIN, ApiHost, Host, resolve_host


logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "oauth2/authorize"
TOKEN_PATH = "oauth2/token"
METADATA_PATH = "oauth2/metadata"


@dataclass(frozen=True)
class TokenResult:
    """Outcome of an authorization code exchange.
    
    Holds either the access token or the error explaining why there is none,
    together with the decoded token endpoint response.
    """
    response: dict[str, Any]
    access_token: str | None = None
    error: MissingFieldError | None = None
    
    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "TokenResult":
        access_token = response.get("access_token")
        if not access_token:
            return cls(response=response, error=MissingFieldError("access_token", response))
        return cls(response=response, access_token=access_token)
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    def unwrap(self) -> str:
        """Return the access token or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.access_token


class MailchimpClient:
    """Thin wrapper around the Mailchimp REST API.
    
    Every call opens a short-lived ``httpx.Client`` bound to the resolved
    host. Responses are decoded into plain dicts; 4xx payloads are returned
    rather than raised so callers can inspect ``title``/``detail``.
    """
    
    def __init__(
        self,
        settings: MailchimpSettings,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings
        self._transport = transport
    
    def request(
        self,
        host: Host,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Make a single request and decode the JSON response.
        
        Args:
            host: LoginHost or ApiHost(data_center)
            method: HTTP method (GET, POST, DELETE)
            path: Path relative to the host (e.g. "lists")
            params: Optional query parameters
            data: Optional form-encoded body
            headers: Optional extra headers
            
        Returns:
            The decoded body, for 2xx and 4xx responses alike
            
        Raises:
            MissingDataCenterError: if an API host has no data center
            DecodeError: if the body is not valid JSON
            httpx.HTTPStatusError: on 5xx responses
            httpx.TransportError: on timeouts and connection failures
        """
        base_url = resolve_host(host, self.settings)
        logger.debug("Mailchimp request: %s %s%s", method, base_url, path)
        
        with httpx.Client(
            base_url=base_url,
            timeout=self.settings.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = client.request(
                method=method,
                url=path,
                params=params,
                data=data,
                headers=headers,
            )
            
            if response.is_client_error:
                logger.warning(
                    "Mailchimp returned %s for %s %s", response.status_code, method, path
                )
            else:
                response.raise_for_status()
            
            return self._decode(response)
    
    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        # DELETE answers 204 with no body
        if not response.content:
            return {}
        try:
            decoded = response.json()
        except ValueError as exc:
            raise DecodeError(response.status_code, response.text) from exc

        # Valid JSON that is not an object ([], null, "x") is still unusable
        if not isinstance(decoded, dict):
            raise DecodeError(response.status_code, response.text)
        return decoded
    
    def url(self, path: str, host: Host, parameters: dict[str, Any] | None = None) -> str:
        """Build a URL for browser navigation, e.g. the OAuth consent screen.
        
        The client credentials and ``response_type=code`` are always included;
        entries in ``parameters`` override them.
        """
        query = {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "response_type": "code",
        }
        
        if parameters:
            query.update(parameters)
        
        return f"{resolve_host(host, self.settings)}{path}?{urlencode(query)}"
    
    def get_login_url(self, **parameters: Any) -> str:
        """Get the authorization URL to redirect the user to."""
        return self.url(AUTHORIZE_PATH, LOGIN, parameters)
    
    def request_token(self, code: str) -> TokenResult:
        """Exchange an authorization code at the token endpoint."""
        parameters = {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "grant_type": "authorization_code",
            "redirect_uri": self.settings.redirect_uri,
        }
        parameters.update({"code": code})
        
        result = TokenResult.from_response(self._post(LOGIN, TOKEN_PATH, parameters))
        if not result.ok:
            logger.warning("Token exchange returned no access token: %s", result.response)
        return result
    
    def get_access_token(self, code: str) -> str:
        """Get the user's access token.
        
        Raises:
            MissingFieldError: if the token endpoint answered without one
        """
        return self.request_token(code).unwrap()
    
    def get_account_details(self, access_token: str) -> dict[str, Any]:
        """Get the account metadata (``dc``, ``login``, ``api_endpoint``...) for a token.
        
        The token is merged into the result under ``access_token``.
        """
        response = self.request(
            LOGIN,
            "GET",
            METADATA_PATH,
            headers=_auth_headers(access_token),
        )
        return {**response, "access_token": access_token}
    
    def _post(
        self,
        host: Host,
        path: str,
        parameters: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return self.request(host, "POST", path, data=parameters, headers=headers)
    
    def post(
        self,
        path: str,
        parameters: dict[str, Any],
        data_center: str,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        """Make a form-encoded POST call to the API."""
        return self._post(ApiHost(data_center), path, parameters, _auth_headers(access_token))
    
    def get(
        self,
        path: str,
        parameters: dict[str, Any],
        data_center: str,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        """Make a GET call to the API.
        
        Args:
            path: Endpoint path (e.g. "lists")
            parameters: Query parameters
            data_center: The account's data center code (e.g. "us1")
            access_token: Sent as ``Authorization: OAuth <token>`` when given
        """
        return self.request(
            ApiHost(data_center), "GET", path,
            params=parameters,
            headers=_auth_headers(access_token),
        )
    
    def delete(
        self,
        path: str,
        parameters: dict[str, Any],
        data_center: str,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        """Make a DELETE call to the API."""
        return self.request(
            ApiHost(data_center), "DELETE", path,
            params=parameters,
            headers=_auth_headers(access_token),
        )


def _auth_headers(access_token: str | None) -> dict[str, str] | None:
    if access_token is None:
        return None
    return {"Authorization": f"OAuth {access_token}"}
