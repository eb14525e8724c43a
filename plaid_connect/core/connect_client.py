from __future__ import annotations

import logging
from typing import Any, FrozenSet, Mapping, NamedTuple, Optional, Union

import httpx

from ..config import Settings
from ..errors import PlaidConnectError, UnrecognizedResponse
from .classifier import Variant, classify
from .credentials import CredentialsLike, resolve_credentials
from .data_models import CONNECT, ERROR, MESSAGE, MFA_MASK, MFA_MESSAGE, MFA_QUESTION, PlaidError
from .http import build_request, send_request

logger = logging.getLogger(__name__)

OK = "ok"
FAILED = "error"

CONNECT_ENDPOINT = "connect"
STEP_ENDPOINT = f"{CONNECT_ENDPOINT}/step"
GET_ENDPOINT = f"{CONNECT_ENDPOINT}/get"

ADD_VARIANTS: FrozenSet[str] = frozenset({CONNECT, MFA_QUESTION, MFA_MASK, ERROR})
MFA_VARIANTS: FrozenSet[str] = frozenset({CONNECT, MFA_MESSAGE, ERROR})
GET_VARIANTS: FrozenSet[str] = frozenset({CONNECT, ERROR})
UPDATE_VARIANTS: FrozenSet[str] = frozenset({CONNECT, MFA_QUESTION, ERROR})
UPDATE_MFA_VARIANTS: FrozenSet[str] = frozenset({CONNECT, ERROR})
DELETE_VARIANTS: FrozenSet[str] = frozenset({MESSAGE, ERROR})

Payload = Mapping[Any, Any]


class ConnectResult(NamedTuple):
    """``("ok", variant)`` or ``("error", failure)``."""

    status: str
    value: Union[Variant, PlaidConnectError]

    @property
    def ok(self) -> bool:
        return self.status == OK


class PlaidConnectClient:
    """Client for the Plaid Connect endpoints.

    Every call is a single request; nothing is retried or cached. Failures
    come back as ``ConnectResult("error", ...)`` rather than being raised.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings.from_env()
        if not self.settings.root_uri:
            raise ValueError("root_uri is required.")
        self._client = httpx.Client(timeout=self.settings.timeout, transport=transport)

    def __enter__(self) -> "PlaidConnectClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Dispose the underlying HTTP client."""
        self._client.close()

    def _call(
        self,
        method: str,
        endpoint: str,
        params: Optional[Payload],
        cred: Optional[CredentialsLike],
        expected: FrozenSet[str],
    ) -> ConnectResult:
        try:
            credentials = resolve_credentials(cred, self.settings)
            request = build_request(method, endpoint, credentials, params, self.settings.root_uri)
            response = send_request(self._client, request)
        except PlaidConnectError as exc:
            return ConnectResult(FAILED, exc)

        try:
            variant = classify(response.body, expected)
        except UnrecognizedResponse as exc:
            exc.status_code = response.status_code
            logger.warning("%s %s (status %s): %s", method, endpoint, response.status_code, exc)
            return ConnectResult(FAILED, exc)

        if isinstance(variant, PlaidError):
            logger.info(
                "%s %s returned Plaid error code=%s error_code=%s",
                method,
                endpoint,
                variant.code,
                variant.error_code,
            )
            return ConnectResult(FAILED, variant)

        if response.status_code >= 400:
            logger.warning("%s %s: status %s with a non-error body", method, endpoint, response.status_code)
            return ConnectResult(
                FAILED,
                UnrecognizedResponse(
                    f"HTTP {response.status_code} without an error body",
                    body=response.body,
                    status_code=response.status_code,
                ),
            )
        return ConnectResult(OK, variant)

    def add(self, params: Payload, cred: Optional[CredentialsLike] = None) -> ConnectResult:
        """Add a Connect user with their institution login.

        Payload: ``type`` (institution code), ``username``, ``password``,
        ``pin`` (USAA only) and an optional ``options`` map (``login_only``,
        ``webhook``, ``pending``, ``start_date``, ``end_date``, ``list``).
        Yields ``Connect``, ``MfaQuestion``, ``MfaMask`` or ``PlaidError``.
        """
        return self._call("POST", CONNECT_ENDPOINT, params, cred, ADD_VARIANTS)

    def mfa(self, params: Payload, cred: Optional[CredentialsLike] = None) -> ConnectResult:
        """Submit an MFA answer (``mfa``) or a delivery choice (``options.send_method``).

        Yields ``Connect``, ``MfaMessage`` or ``PlaidError``.
        """
        return self._call("POST", STEP_ENDPOINT, params, cred, MFA_VARIANTS)

    def get(self, params: Payload, cred: Optional[CredentialsLike] = None) -> ConnectResult:
        """Fetch account and transaction data for ``access_token``.

        ``options`` may narrow it down with ``pending``, ``account``, ``gte``
        and ``lte``.
        """
        return self._call("POST", GET_ENDPOINT, params, cred, GET_VARIANTS)

    def update(self, params: Payload, cred: Optional[CredentialsLike] = None) -> ConnectResult:
        """Patch a user's institution credentials or webhook."""
        return self._call("PATCH", CONNECT_ENDPOINT, params, cred, UPDATE_VARIANTS)

    def update_mfa(self, params: Payload, cred: Optional[CredentialsLike] = None) -> ConnectResult:
        """Answer the MFA challenge raised by ``update``."""
        return self._call("PATCH", STEP_ENDPOINT, params, cred, UPDATE_MFA_VARIANTS)

    def delete(self, params: Payload, cred: Optional[CredentialsLike] = None) -> ConnectResult:
        """Delete the user identified by ``access_token``."""
        return self._call("DELETE", CONNECT_ENDPOINT, params, cred, DELETE_VARIANTS)
