"""Client for the Plaid Connect API."""

from . import connect
from .config import Settings
from .core import (
    Account,
    ConfigurationError,
    Connect,
    ConnectResult,
    Credentials,
    InvalidPayload,
    Message,
    MfaMask,
    MfaMessage,
    MfaQuestion,
    PlaidConnectClient,
    PlaidConnectError,
    PlaidError,
    Transaction,
    TransportFailure,
    UnrecognizedResponse,
)

__all__ = [
    "connect",
    "Settings",
    "PlaidConnectClient",
    "ConnectResult",
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
