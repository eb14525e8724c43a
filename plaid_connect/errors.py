"""Failures surfaced by Connect calls that are not server error bodies."""
from __future__ import annotations

from typing import Any, Optional


class PlaidConnectError(Exception):
    """Base class for client-side failures."""


class ConfigurationError(PlaidConnectError):
    """Neither explicit nor configured credentials are available."""


class TransportFailure(PlaidConnectError):
    """The HTTP exchange itself failed (network error, timeout, undecodable body)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnrecognizedResponse(PlaidConnectError):
    """A decoded body matched none of the known response shapes."""

    def __init__(self, message: str, body: Any = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class InvalidPayload(PlaidConnectError):
    """The request payload cannot be encoded as strict JSON."""
