"""Workspace state shared by the MCP tools.

A Workspace owns the note index for one notes root and the text of every
document the editor currently has open. Requests are handled one at a time by
the host, so nothing here is locked.
"""

import logging
from pathlib import Path

from wikilink_mcp.completion import CompletionItem, CompletionProvider
from wikilink_mcp.config import Config
from wikilink_mcp.indexer import Indexer, Note, NoteIndex, WalkResult
from wikilink_mcp.scanner import scan_link_context

logger = logging.getLogger(__name__)


def offset_at(text: str, line: int, character: int) -> int:
    """
    Convert a zero-based (line, character) position to an offset in ``text``.

    Lines end at '\\n' (a preceding '\\r' belongs to the line ending). A line past
    the end maps to the end of the text and a character past the end of its
    line maps to the end of that line.
    """
    if line < 0:
        return 0

    line_start = 0
    for _ in range(line):
        newline = text.find("\n", line_start)
        if newline == -1:
            return len(text)
        line_start = newline + 1

    line_end = text.find("\n", line_start)
    if line_end == -1:
        line_end = len(text)
    elif line_end > line_start and text[line_end - 1] == "\r":
        line_end -= 1

    return line_start + max(0, min(character, line_end - line_start))


class Workspace:
    """Open documents plus the note index they and the notes root feed."""

    def __init__(self, config: Config):
        self.config = config
        self.index = NoteIndex()
        self.indexer = Indexer(
            self.index,
            extension=config.note_extension,
            max_depth=config.max_depth,
            max_entries=config.max_entries,
        )
        self.completions = CompletionProvider(self.index)
        self._documents: dict[str, str] = {}

    @property
    def root_uri(self) -> str:
        return self.indexer.root_uri

    def initialize(self, root: str | Path | None = None) -> WalkResult:
        """Set the notes root (path or file URI) and index every note under it."""
        self.indexer.set_root(root if root is not None else self.config.notes_root)
        return self.indexer.reindex()

    def reindex(self) -> WalkResult:
        """Walk the notes root again, then re-apply the text of open documents."""
        result = self.indexer.reindex()
        for uri, text in self._documents.items():
            self.indexer.index_document(uri, text)
        return result

    def did_open(self, uri: str, text: str) -> Note:
        self._documents[uri] = text
        return self.indexer.index_document(uri, text)

    def did_change(self, uri: str, text: str) -> Note:
        self._documents[uri] = text
        return self.indexer.index_document(uri, text)

    def did_close(self, uri: str) -> bool:
        """Forget an open document. Its note stays in the index."""
        return self._documents.pop(uri, None) is not None

    def document_text(self, uri: str) -> str | None:
        return self._documents.get(uri)

    def completion(self, uri: str, offset: int) -> list[CompletionItem]:
        """Completion entries for the cursor at ``offset`` in an open document."""
        text = self._documents.get(uri)
        if text is None:
            logger.debug("Completion requested for unopened document %s", uri)
            return []
        context = scan_link_context(text, offset)
        logger.debug("Completion context at %s:%d is %s", uri, offset, context)
        return self.completions.complete(context)

    def resolve(self, item: CompletionItem) -> CompletionItem:
        return self.completions.resolve(item)

    def heading_titles(self, identifier: str) -> list[str]:
        """Heading titles of one note, without touching the completion state."""
        note = self.index.lookup(identifier)
        return [] if note is None else [heading.title for heading in note.headings]
