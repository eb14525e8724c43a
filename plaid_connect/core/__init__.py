"""Core package exposing the Connect client and its result types."""

from .classifier import classify
from .connect_client import ConnectResult, PlaidConnectClient
from .credentials import resolve_credentials
from .data_models import (
    Account,
    Connect,
    Credentials,
    Message,
    MfaMask,
    MfaMessage,
    MfaQuestion,
    PlaidError,
    Transaction,
)
from ..errors import ConfigurationError, InvalidPayload, PlaidConnectError, TransportFailure, UnrecognizedResponse
from .http import build_request

__all__ = [
    "PlaidConnectClient",
    "ConnectResult",
    "classify",
    "resolve_credentials",
    "build_request",
    "Credentials",
    "Account",
    "Transaction",
    "Connect",
    "MfaQuestion",
    "MfaMessage",
    "MfaMask",
    "Message",
    "PlaidError",
    "PlaidConnectError",
    "ConfigurationError",
    "TransportFailure",
    "InvalidPayload",
    "UnrecognizedResponse",
]
