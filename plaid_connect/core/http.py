from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import httpx

from ..errors import InvalidPayload, TransportFailure
from .data_models import Credentials

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


@dataclass
class Response:
    status_code: int
    body: Any


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    return key if isinstance(key, str) else str(key)


def merge_payload(payload: Optional[Mapping[Any, Any]], credentials: Credentials) -> Dict[str, Any]:
    """Top-level merge of the API keys into the caller's payload.

    Nested mappings are left as they are; a colliding top-level key is
    replaced by the credential value.
    """
    merged: Dict[str, Any] = {_key(key): value for key, value in (payload or {}).items()}
    merged["client_id"] = credentials.client_id
    merged["secret"] = credentials.secret
    return merged


def endpoint_url(root_uri: str, endpoint: str) -> str:
    return f"{root_uri.rstrip('/')}/{endpoint.lstrip('/')}"


def build_request(
    method: str,
    endpoint: str,
    credentials: Credentials,
    payload: Optional[Mapping[Any, Any]],
    root_uri: str,
) -> httpx.Request:
    body = merge_payload(payload, credentials)
    try:
        content = json.dumps(body, default=str, allow_nan=False)
    except ValueError as exc:
        raise InvalidPayload(f"Payload for {endpoint} is not valid JSON: {exc}") from exc
    return httpx.Request(
        method.upper(),
        endpoint_url(root_uri, endpoint),
        content=content.encode("utf-8"),
        headers=JSON_HEADERS,
    )


def send_request(client: httpx.Client, request: httpx.Request) -> Response:
    """Perform exactly one HTTP exchange and decode the JSON body."""
    try:
        response = client.send(request)
    except httpx.RequestError as exc:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        raise TransportFailure(f"{request.method} {request.url} failed: {exc}", cause=exc) from exc

    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    try:
        body = response.json()
    except ValueError as exc:
        logger.warning(
            "Undecodable body from %s %s (status %s)",
            request.method,
            request.url.path,
            response.status_code,
        )
        raise TransportFailure(
            f"Response from {request.method} {request.url} is not valid JSON (status {response.status_code})",
            cause=exc,
        ) from exc
    return Response(status_code=response.status_code, body=body)
