"""In-memory note index keyed by identifier."""

from wikilink_mcp.indexer.models import FrontmatterData, Heading, Note


class NoteIndex:
    """
    Mutable store of notes keyed by identifier.

    Iteration order is the order in which identifiers were first upserted;
    replacing a note's headings keeps its position. Notes are never removed.
    """

    def __init__(self) -> None:
        self._notes: dict[str, Note] = {}

    def upsert(
        self,
        identifier: str,
        headings: list[Heading],
        uri: str = "",
        metadata: FrontmatterData | None = None,
    ) -> Note:
        """Create the note, or replace the headings of the existing one."""
        note = self._notes.get(identifier)
        if note is None:
            note = Note(identifier=identifier)
            self._notes[identifier] = note
        note.headings = list(headings)
        if uri:
            note.uri = uri
        if metadata is not None:
            note.metadata = metadata
        return note

    def lookup(self, identifier: str) -> Note | None:
        return self._notes.get(identifier)

    def all(self) -> list[Note]:
        return list(self._notes.values())

    def identifiers(self) -> list[str]:
        return list(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._notes
