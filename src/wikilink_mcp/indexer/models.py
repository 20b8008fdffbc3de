"""Data models for the note index."""

from dataclasses import dataclass, field


@dataclass
class Heading:
    """A heading extracted from a note."""

    title: str
    level: int = 1  # Always 1, regardless of the number of leading '#'


@dataclass
class FrontmatterData:
    """Parsed frontmatter data."""

    title: str | None = None
    description: str | None = None
    aliases: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    raw: dict | None = None


@dataclass
class Note:
    """Represents a note in the index."""

    identifier: str  # Relative to the notes root, extension stripped
    headings: list[Heading] = field(default_factory=list)
    uri: str = ""  # Source URI last seen for this note
    metadata: FrontmatterData = field(default_factory=FrontmatterData)
