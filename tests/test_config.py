"""Tests for config module."""

from pathlib import Path

import pytest

from wikilink_mcp.config import Config

ENV_VARS = (
    "WIKILINK_ROOT",
    "WIKILINK_EXTENSION",
    "WIKILINK_MAX_DEPTH",
    "WIKILINK_MAX_ENTRIES",
    "WIKILINK_TRANSPORT",
    "WIKILINK_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_config_defaults():
    """Test config loads with defaults when no env vars set."""
    config = Config.from_env()
    assert config.notes_root == Path.cwd()
    assert config.note_extension == ".md"
    assert config.max_depth == 32
    assert config.max_entries == 10000
    assert config.transport == "stdio"
    assert config.port == 8080


def test_config_from_env(monkeypatch):
    """Test config loads from environment variables."""
    monkeypatch.setenv("WIKILINK_ROOT", "/custom/notes")
    monkeypatch.setenv("WIKILINK_EXTENSION", ".txt")
    monkeypatch.setenv("WIKILINK_MAX_DEPTH", "4")
    monkeypatch.setenv("WIKILINK_MAX_ENTRIES", "500")
    monkeypatch.setenv("WIKILINK_TRANSPORT", "sse")
    monkeypatch.setenv("WIKILINK_PORT", "9000")

    config = Config.from_env()
    assert config.notes_root == Path("/custom/notes")
    assert config.note_extension == ".txt"
    assert config.max_depth == 4
    assert config.max_entries == 500
    assert config.transport == "sse"
    assert config.port == 9000


def test_config_overrides_take_precedence(monkeypatch):
    """Test CLI overrides win over environment variables."""
    monkeypatch.setenv("WIKILINK_ROOT", "/from/env")
    monkeypatch.setenv("WIKILINK_EXTENSION", ".txt")

    config = Config.from_env(root_override="/from/cli", extension_override=".markdown")
    assert config.notes_root == Path("/from/cli")
    assert config.note_extension == ".markdown"


def test_config_tilde_expansion(monkeypatch):
    """Test config expands tilde in paths."""
    monkeypatch.setenv("WIKILINK_ROOT", "~/notes")
    config = Config.from_env()
    assert "~" not in str(config.notes_root)
    assert config.notes_root.is_absolute()


def test_config_extension_without_dot(monkeypatch):
    """Test a bare extension gets a leading dot."""
    monkeypatch.setenv("WIKILINK_EXTENSION", "md")
    assert Config.from_env().note_extension == ".md"


def test_config_empty_extension(monkeypatch):
    """Test config raises error for an empty extension."""
    monkeypatch.setenv("WIKILINK_EXTENSION", " ")
    with pytest.raises(ValueError, match="WIKILINK_EXTENSION must not be empty"):
        Config.from_env()


def test_config_max_depth_zero_allowed(monkeypatch):
    """Test max depth of 0 keeps discovery in the root."""
    monkeypatch.setenv("WIKILINK_MAX_DEPTH", "0")
    assert Config.from_env().max_depth == 0


def test_config_invalid_max_depth(monkeypatch):
    """Test config raises error for a negative max depth."""
    monkeypatch.setenv("WIKILINK_MAX_DEPTH", "-1")
    with pytest.raises(ValueError, match="Invalid WIKILINK_MAX_DEPTH"):
        Config.from_env()


def test_config_invalid_max_entries(monkeypatch):
    """Test config raises error for non-numeric or zero max entries."""
    monkeypatch.setenv("WIKILINK_MAX_ENTRIES", "lots")
    with pytest.raises(ValueError, match="Invalid WIKILINK_MAX_ENTRIES"):
        Config.from_env()

    monkeypatch.setenv("WIKILINK_MAX_ENTRIES", "0")
    with pytest.raises(ValueError, match="Value must be >= 1"):
        Config.from_env()


def test_config_invalid_transport(monkeypatch):
    """Test config raises error for an unknown transport."""
    monkeypatch.setenv("WIKILINK_TRANSPORT", "carrier-pigeon")
    with pytest.raises(ValueError, match="Invalid WIKILINK_TRANSPORT"):
        Config.from_env()


def test_config_invalid_port_non_numeric(monkeypatch):
    """Test config raises error for non-numeric port."""
    monkeypatch.setenv("WIKILINK_PORT", "not_a_number")
    with pytest.raises(ValueError, match="Invalid WIKILINK_PORT"):
        Config.from_env()


def test_config_invalid_port_out_of_range(monkeypatch):
    """Test config raises error for port out of valid range."""
    monkeypatch.setenv("WIKILINK_PORT", "70000")
    with pytest.raises(ValueError, match="Port must be between 1 and 65535"):
        Config.from_env()
