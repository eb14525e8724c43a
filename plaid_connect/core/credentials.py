from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional, Union

from ..config import Settings
from ..errors import ConfigurationError
from .data_models import Credentials

logger = logging.getLogger(__name__)

CredentialsLike = Union[Credentials, Mapping[str, Any]]


def _coerce(explicit: CredentialsLike) -> Credentials:
    if isinstance(explicit, Credentials):
        return explicit
    if not isinstance(explicit, Mapping):
        raise ConfigurationError(
            f"Explicit credentials must be a mapping or Credentials, got {type(explicit).__name__}"
        )
    # Explicit credentials are forwarded as given; the API validates them.
    return Credentials.model_construct(
        client_id=explicit.get("client_id"),
        secret=explicit.get("secret"),
    )


def resolve_credentials(
    explicit: Optional[CredentialsLike] = None,
    settings: Optional[Settings] = None,
) -> Credentials:
    """Return the API keys for a call.

    Explicit credentials win unconditionally. Otherwise the values come from
    ``settings``, with the ``PLAID_CLIENT_ID`` / ``PLAID_SECRET`` environment
    variables filling whatever the settings leave empty.
    """
    if explicit is not None:
        return _coerce(explicit)

    client_id = settings.client_id if settings is not None else None
    secret = settings.secret if settings is not None else None
    if not client_id:
        client_id = os.getenv("PLAID_CLIENT_ID")
    if not secret:
        secret = os.getenv("PLAID_SECRET")

    if not client_id or not secret:
        missing = [name for name, value in (("client_id", client_id), ("secret", secret)) if not value]
        logger.debug("Credential lookup failed, missing: %s", ", ".join(missing))
        raise ConfigurationError(
            f"Plaid credentials not configured (missing {', '.join(missing)}); "
            "pass them explicitly or set PLAID_CLIENT_ID and PLAID_SECRET."
        )
    return Credentials(client_id=client_id, secret=secret)
