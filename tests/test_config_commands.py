"""Tests for the config subcommands."""

from pathlib import Path

import pytest

from srenity import config_commands
from srenity.config import get_config


def test_set_masks_secret(home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the client secret is stored but never echoed."""
    config_commands.set("client_secret", "s3cret")

    assert capsys.readouterr().out.strip() == "client_secret = ******** (local)"
    assert get_config().get("client_secret") == "s3cret"


def test_set_global(home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test storing a setting in the home directory."""
    config_commands.set("api_url", "https://api.example.test", global_=True)

    assert capsys.readouterr().out.strip() == "api_url = https://api.example.test (global)"
    assert (home / ".srenity" / "config.yaml").exists()


def test_get(home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing set and unset settings."""
    get_config().set("client_id", "svc")

    config_commands.get("client_id")
    config_commands.get("auth_url")

    assert capsys.readouterr().out.splitlines() == ["client_id = svc", "auth_url is not set"]


def test_unset(home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test removing a setting."""
    get_config().set("client_id", "svc")

    config_commands.unset("client_id")

    assert capsys.readouterr().out.strip() == "client_id removed (local)"
    assert get_config().get("client_id") is None


def test_list_flags_missing_and_unknown_keys(home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test listing known keys in order, then unknown ones."""
    config = get_config()
    config.set("api_url", "https://api.example.test")
    config.set("client_secret", "s3cret")
    config.set("timeout", "30")

    config_commands.list_config()

    assert capsys.readouterr().out.splitlines() == [
        "api_url = https://api.example.test",
        "auth_url (not set)",
        "client_id (not set)",
        "client_secret = ********",
        "timeout = 30 (unknown key)",
        "(local)",
    ]
