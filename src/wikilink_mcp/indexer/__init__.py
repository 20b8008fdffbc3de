"""
Indexer module for wikilink-mcp.

This module discovers markdown notes, extracts their headings and keeps the
in-memory note index that link completion reads from.
"""

from wikilink_mcp.indexer.index import NoteIndex
from wikilink_mcp.indexer.indexer import Indexer, resolve_root
from wikilink_mcp.indexer.models import FrontmatterData, Heading, Note
from wikilink_mcp.indexer.parser import derive_identifier, extract_headings, parse_frontmatter
from wikilink_mcp.indexer.walker import FileInfo, WalkResult, walk_notes_root

__all__ = [
    "FileInfo",
    "FrontmatterData",
    "Heading",
    "Indexer",
    "Note",
    "NoteIndex",
    "WalkResult",
    "derive_identifier",
    "extract_headings",
    "parse_frontmatter",
    "resolve_root",
    "walk_notes_root",
]
