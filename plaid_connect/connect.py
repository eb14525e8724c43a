"""Function interface to the Plaid Connect endpoints.

All requests take a payload mapping (``{"access_token": ...}``); keys may be
strings or ``Enum`` members. Credentials come from ``cred`` when given,
otherwise from ``settings`` (default: the environment). Each function opens
its own HTTP client for the duration of the call.

    status, value = connect.add({"username": "plaid_test", "password": "plaid_good", "type": "bofa"})
"""
from __future__ import annotations

from typing import Optional

import httpx

from .config import Settings
from .core.connect_client import FAILED, ConnectResult, Payload, PlaidConnectClient
from .core.credentials import CredentialsLike
from .errors import ConfigurationError

__all__ = ["add", "mfa", "get", "update", "update_mfa", "delete"]


def _run(
    operation: str,
    params: Payload,
    cred: Optional[CredentialsLike],
    settings: Optional[Settings],
    transport: Optional[httpx.BaseTransport],
) -> ConnectResult:
    try:
        client = PlaidConnectClient(settings=settings, transport=transport)
    except ConfigurationError as exc:
        return ConnectResult(FAILED, exc)
    with client:
        return getattr(client, operation)(params, cred)


def add(
    params: Payload,
    cred: Optional[CredentialsLike] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ConnectResult:
    return _run("add", params, cred, settings, transport)


def mfa(
    params: Payload,
    cred: Optional[CredentialsLike] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ConnectResult:
    return _run("mfa", params, cred, settings, transport)


def get(
    params: Payload,
    cred: Optional[CredentialsLike] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ConnectResult:
    return _run("get", params, cred, settings, transport)


def update(
    params: Payload,
    cred: Optional[CredentialsLike] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ConnectResult:
    return _run("update", params, cred, settings, transport)


def update_mfa(
    params: Payload,
    cred: Optional[CredentialsLike] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ConnectResult:
    return _run("update_mfa", params, cred, settings, transport)


def delete(
    params: Payload,
    cred: Optional[CredentialsLike] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ConnectResult:
    return _run("delete", params, cred, settings, transport)
