from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .errors import ConfigurationError

DEFAULT_ROOT_URI = "https://tartan.plaid.com"
DEFAULT_TIMEOUT_SECONDS = 20.0


def read_env_file(path: Optional[Path] = None) -> Dict[str, str]:
    """Return the entries of a `.env` file without exporting them."""
    env_path = path or Path.cwd() / ".env"
    if not env_path.exists():
        return {}
    return {key: value for key, value in dotenv_values(env_path).items() if key and value is not None}


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from exc


class Settings:
    """Runtime settings shared by every Connect call.

    Values default to ``env`` (the process environment unless given);
    keyword arguments take precedence so tests and embedding applications
    can build their own. Raises ``ConfigurationError`` on a malformed
    ``PLAID_HTTP_TIMEOUT``.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        secret: Optional[str] = None,
        root_uri: Optional[str] = None,
        timeout: Optional[float] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        env = os.environ if env is None else env
        self.client_id: Optional[str] = client_id if client_id is not None else env.get("PLAID_CLIENT_ID")
        self.secret: Optional[str] = secret if secret is not None else env.get("PLAID_SECRET")
        self.root_uri: str = root_uri or env.get("PLAID_ROOT_URI") or DEFAULT_ROOT_URI
        self.timeout: float = (
            timeout if timeout is not None else _float_env(env, "PLAID_HTTP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
        )

    @classmethod
    def from_env(cls, path: Optional[Path] = None) -> "Settings":
        """Settings from the environment, with `.env` filling unset variables.

        ``os.environ`` is only read, never updated.
        """
        env = read_env_file(path)
        env.update(os.environ)
        return cls(env=env)

    def __repr__(self) -> str:
        return (
            f"Settings(client_id={self.client_id!r}, secret={'***' if self.secret else None}, "
            f"root_uri={self.root_uri!r}, timeout={self.timeout!r})"
        )
