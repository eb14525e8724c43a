from __future__ import annotations

import os

import pytest

from plaid_connect.config import DEFAULT_ROOT_URI, Settings
from plaid_connect.core.credentials import resolve_credentials
from plaid_connect.core.data_models import Credentials
from plaid_connect.errors import ConfigurationError


def test_explicit_credentials_win_over_settings(settings) -> None:
    creds = resolve_credentials({"client_id": "test_id", "secret": "test_secret"}, settings)
    assert creds.client_id == "test_id"
    assert creds.secret == "test_secret"


def test_explicit_credentials_are_not_validated(settings) -> None:
    partial = resolve_credentials({"client_id": "only_id"}, settings)
    assert partial.client_id == "only_id"
    assert partial.secret is None

    given = Credentials(client_id="a", secret="b")
    assert resolve_credentials(given, settings) is given


def test_settings_used_when_no_explicit_credentials(settings) -> None:
    creds = resolve_credentials(None, settings)
    assert creds == Credentials(client_id="config_id", secret="config_secret")


def test_environment_fills_missing_settings(monkeypatch) -> None:
    monkeypatch.setenv("PLAID_SECRET", "env_secret")
    creds = resolve_credentials(None, Settings(client_id="config_id", secret=""))
    assert creds.client_id == "config_id"
    assert creds.secret == "env_secret"


def test_environment_used_without_settings(monkeypatch) -> None:
    monkeypatch.setenv("PLAID_CLIENT_ID", "env_id")
    monkeypatch.setenv("PLAID_SECRET", "env_secret")
    assert resolve_credentials() == Credentials(client_id="env_id", secret="env_secret")


def test_missing_credentials_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_credentials(None, Settings())
    assert "client_id" in str(excinfo.value)
    assert "secret" in str(excinfo.value)


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("PLAID_CLIENT_ID", "env_id")
    monkeypatch.setenv("PLAID_ROOT_URI", "https://api.plaid.com")
    monkeypatch.setenv("PLAID_HTTP_TIMEOUT", "5")
    cfg = Settings()
    assert cfg.client_id == "env_id"
    assert cfg.secret is None
    assert cfg.root_uri == "https://api.plaid.com"
    assert cfg.timeout == 5.0
    assert Settings(root_uri=None).root_uri == "https://api.plaid.com"


def test_settings_defaults_and_repr_hide_secret() -> None:
    cfg = Settings(secret="hunter2")
    assert cfg.root_uri == DEFAULT_ROOT_URI
    assert "hunter2" not in repr(cfg)
    assert "hunter2" not in repr(Credentials(client_id="x", secret="hunter2"))


def test_non_mapping_explicit_credentials_raise_configuration_error(settings) -> None:
    with pytest.raises(ConfigurationError, match="tuple"):
        resolve_credentials(("test_id", "test_secret"), settings)


def test_from_env_reads_env_file_without_exporting_it(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("PLAID_FILE_ONLY", raising=False)
    (tmp_path / ".env").write_text(
        "PLAID_CLIENT_ID=file_id\nPLAID_SECRET=file_secret\nPLAID_HTTP_TIMEOUT=7\nPLAID_FILE_ONLY=kept\n"
    )
    monkeypatch.chdir(tmp_path)

    cfg = Settings.from_env()

    assert cfg.client_id == "file_id"
    assert cfg.secret == "file_secret"
    assert cfg.timeout == 7.0
    assert "PLAID_CLIENT_ID" not in os.environ
    assert "PLAID_FILE_ONLY" not in os.environ


def test_exported_variables_beat_env_file(monkeypatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("PLAID_CLIENT_ID=file_id\nPLAID_SECRET=file_secret\n")
    monkeypatch.setenv("PLAID_CLIENT_ID", "env_id")

    cfg = Settings.from_env(tmp_path / ".env")

    assert cfg.client_id == "env_id"
    assert cfg.secret == "file_secret"


def test_from_env_without_env_file(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = Settings.from_env()
    assert cfg.client_id is None
    assert cfg.root_uri == DEFAULT_ROOT_URI


def test_malformed_timeout_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("PLAID_HTTP_TIMEOUT", "abc")
    with pytest.raises(ConfigurationError, match="PLAID_HTTP_TIMEOUT"):
        Settings()
