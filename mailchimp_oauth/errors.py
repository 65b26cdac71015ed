"""Exceptions raised by the Mailchimp client.

Transport failures (timeouts, DNS errors, refused connections) and 5xx
responses are not wrapped: they propagate as ``httpx.TransportError`` and
``httpx.HTTPStatusError``. API-level 4xx errors are not exceptions at all;
their decoded body is returned to the caller.
"""
from typing import Any


class MailchimpError(Exception):
    """Base class for errors raised by this package."""


class DecodeError(MailchimpError, ValueError):
    """The response body is not valid JSON."""
    
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Response with status {status_code} is not valid JSON: {body[:200]!r}"
        )


class MissingFieldError(MailchimpError, KeyError):
    """A required field is absent from a decoded response."""
    
    def __init__(self, field: str, response: dict[str, Any]):
        self.field = field
        self.response = response
        super().__init__(field)
    
    def __str__(self) -> str:
        return f"Field {self.field!r} missing from response: {self.response!r}"


class MissingDataCenterError(MailchimpError, ValueError):
    """A data-center scoped call was made without a data center code."""
    
    def __init__(self):
        super().__init__("A data center code (e.g. 'us1') is required for API calls")
