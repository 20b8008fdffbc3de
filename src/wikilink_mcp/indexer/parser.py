"""Parsers for headings, YAML frontmatter and note identifiers."""

import logging
import re
from urllib.parse import unquote

import yaml

from wikilink_mcp.indexer.models import FrontmatterData, Heading

logger = logging.getLogger(__name__)

# ATX heading: one or more '#', a single space, then content
HEADING_PATTERN = re.compile(r"^#+ (.+)")


def extract_headings(text: str) -> list[Heading]:
    """
    Extract ATX headings from markdown text, in line order.

    The level is always 1; the number of '#' characters is not recorded.
    """
    headings: list[Heading] = []
    for line in text.split("\n"):
        match = HEADING_PATTERN.match(line)
        if not match:
            continue
        title = match.group(0).lstrip("#").strip()
        if title:
            headings.append(Heading(title=title, level=1))
    return headings


def _as_string_list(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def parse_frontmatter(content: str, source: str = "") -> FrontmatterData:
    """
    Parse YAML frontmatter from markdown content.

    Args:
        content: The full markdown content
        source: Where the content came from, used for logging only

    Returns:
        FrontmatterData, empty if there is no valid frontmatter mapping.
    """
    data = FrontmatterData()

    if not content.startswith("---"):
        return data

    parts = content.split("---", 2)
    if len(parts) < 3:
        return data

    try:
        raw = yaml.safe_load(parts[1])
    except yaml.YAMLError as e:
        logger.debug("Invalid YAML frontmatter in %s: %s", source, e)
        return data

    if not isinstance(raw, dict):
        return data

    data.raw = raw
    title = raw.get("title")
    if title is not None:
        data.title = str(title)
    description = raw.get("description")
    if description is not None:
        data.description = str(description)
    data.aliases = _as_string_list(raw.get("aliases"))
    data.tags = _as_string_list(raw.get("tags"))
    return data


def derive_identifier(uri: str, root_uri: str, extension: str = ".md") -> str:
    """
    Derive a note identifier from a source URI.

    Strips the root URI prefix (only on a path boundary), then a trailing note
    extension, then at most one leading '/'. What is left of a file URI is
    percent-decoded, so "My%20Note.md" becomes "My Note".

    Examples:
        >>> derive_identifier("file:///vault/daily/today.md", "file:///vault")
        'daily/today'
    """
    identifier = uri
    if root_uri and identifier.startswith(root_uri):
        rest = identifier[len(root_uri):]
        if root_uri.endswith("/") or not rest or rest.startswith("/"):
            identifier = rest
    if extension and identifier.endswith(extension):
        identifier = identifier[: identifier.rfind(extension)]
    if identifier.startswith("/"):
        identifier = identifier[1:]
    if uri.startswith("file:"):
        identifier = unquote(identifier)
    return identifier
