"""Completion entries for wiki-links, built from the note index."""

import logging
from dataclasses import dataclass

from wikilink_mcp.indexer.index import NoteIndex
from wikilink_mcp.indexer.models import Note
from wikilink_mcp.scanner import FileLinkContext, HeadingLinkContext, LinkContext

logger = logging.getLogger(__name__)

TEXT_KIND = "text"


@dataclass
class CompletionItem:
    """A completion entry. ``data`` is the entry's position in its list."""

    label: str
    data: int
    kind: str = TEXT_KIND
    detail: str | None = None
    documentation: str | None = None

    def to_dict(self) -> dict:
        result = {"label": self.label, "kind": self.kind, "data": self.data}
        if self.detail is not None:
            result["detail"] = self.detail
        if self.documentation is not None:
            result["documentation"] = self.documentation
        return result


def _note_documentation(note: Note) -> str | None:
    meta = note.metadata
    lines: list[str] = []
    summary = meta.description or meta.title
    if summary:
        lines.append(summary)
    if meta.aliases:
        lines.append("Aliases: " + ", ".join(meta.aliases))
    if meta.tags:
        lines.append("Tags: " + ", ".join(meta.tags))
    return "\n".join(lines) if lines else None


class CompletionProvider:
    """
    Builds completion lists from a NoteIndex and resolves selected entries.

    The provider remembers which collection produced its most recent list (all
    notes, or the headings of one note) so that ``resolve`` can look the
    entry's ``data`` token up in that same collection.
    """

    def __init__(self, index: NoteIndex):
        self.index = index
        self._last_note: str | None = None  # None: last list was all notes

    def file_completions(self) -> list[CompletionItem]:
        self._last_note = None
        return [
            CompletionItem(label=note.identifier, data=position)
            for position, note in enumerate(self.index.all())
        ]

    def heading_completions(self, identifier: str) -> list[CompletionItem]:
        self._last_note = identifier
        note = self.index.lookup(identifier)
        if note is None:
            logger.debug("No note named %r for heading completion", identifier)
            return []
        return [
            CompletionItem(label=heading.title, data=position)
            for position, heading in enumerate(note.headings)
        ]

    def complete(self, context: LinkContext) -> list[CompletionItem]:
        """Dispatch on a scanner classification."""
        if isinstance(context, HeadingLinkContext):
            return self.heading_completions(context.note_identifier)
        if isinstance(context, FileLinkContext):
            return self.file_completions()
        return []

    def resolve(self, item: CompletionItem) -> CompletionItem:
        """
        Fill in ``detail`` and ``documentation`` for a selected entry.

        The item is returned unchanged when its token no longer points at an
        entry with the same label (e.g. the note was edited in between).
        """
        if self._last_note is None:
            notes = self.index.all()
            if 0 <= item.data < len(notes) and notes[item.data].identifier == item.label:
                note = notes[item.data]
                count = len(note.headings)
                item.detail = f"{count} heading" + ("" if count == 1 else "s")
                item.documentation = _note_documentation(note)
                return item
        else:
            note = self.index.lookup(self._last_note)
            if (
                note is not None
                and 0 <= item.data < len(note.headings)
                and note.headings[item.data].title == item.label
            ):
                item.detail = f"{note.identifier}#{item.label}"
                item.documentation = (
                    f"Heading {item.data + 1} of {len(note.headings)} in {note.identifier}"
                )
                return item

        logger.debug("Cannot resolve completion item %r (data=%d)", item.label, item.data)
        return item
