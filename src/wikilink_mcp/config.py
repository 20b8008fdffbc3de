"""Configuration module for wikilink-mcp.

Loads configuration from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path

TRANSPORTS = ("stdio", "sse", "streamable-http")


def _int_from_env(name: str, default: str, minimum: int) -> int:
    value_str = os.getenv(name, default)
    try:
        value = int(value_str)
        if value < minimum:
            raise ValueError(f"Value must be >= {minimum}, got {value}")
    except ValueError as e:
        raise ValueError(f"Invalid {name} value '{value_str}': {e}") from e
    return value


@dataclass
class Config:
    """Application configuration."""

    notes_root: Path
    note_extension: str
    max_depth: int
    max_entries: int
    transport: str
    port: int

    @classmethod
    def from_env(
        cls,
        root_override: str | None = None,
        extension_override: str | None = None,
    ) -> "Config":
        """Load configuration from environment variables.

        Args:
            root_override: If provided, overrides the WIKILINK_ROOT env var.
            extension_override: If provided, overrides the WIKILINK_EXTENSION env var.
        """
        root_str = root_override or os.getenv("WIKILINK_ROOT") or str(Path.cwd())
        notes_root = Path(root_str).expanduser()

        note_extension = extension_override or os.getenv("WIKILINK_EXTENSION", ".md")
        note_extension = note_extension.strip()
        if not note_extension or note_extension == ".":
            raise ValueError("WIKILINK_EXTENSION must not be empty")
        if not note_extension.startswith("."):
            note_extension = "." + note_extension

        max_depth = _int_from_env("WIKILINK_MAX_DEPTH", "32", minimum=0)
        max_entries = _int_from_env("WIKILINK_MAX_ENTRIES", "10000", minimum=1)

        transport = os.getenv("WIKILINK_TRANSPORT", "stdio").lower()
        if transport not in TRANSPORTS:
            raise ValueError(
                f"Invalid WIKILINK_TRANSPORT value '{transport}': "
                f"expected one of {', '.join(TRANSPORTS)}"
            )

        port_str = os.getenv("WIKILINK_PORT", "8080")
        try:
            port = int(port_str)
            if not 1 <= port <= 65535:
                raise ValueError(f"Port must be between 1 and 65535, got {port}")
        except ValueError as e:
            raise ValueError(f"Invalid WIKILINK_PORT value '{port_str}': {e}") from e

        return cls(
            notes_root=notes_root,
            note_extension=note_extension,
            max_depth=max_depth,
            max_entries=max_entries,
            transport=transport,
            port=port,
        )
