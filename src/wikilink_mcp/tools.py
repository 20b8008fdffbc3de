"""MCP tools for the wikilink-mcp server.

This module defines the tools exposed by the MCP server:
- open_document / change_document / close_document: editor document events
- complete: wiki-link completion at a cursor position
- resolve_completion: detail and documentation for a selected entry
- list_notes: every indexed note with its headings
- reindex: walk the notes root again
"""

from fastmcp import FastMCP

from wikilink_mcp.completion import TEXT_KIND, CompletionItem
from wikilink_mcp.indexer import Note
from wikilink_mcp.workspace import Workspace, offset_at


def _note_summary(note: Note) -> dict:
    return {"identifier": note.identifier, "headings": len(note.headings)}


def register_tools(mcp: FastMCP, workspace: Workspace) -> None:
    """Register all tools with the FastMCP server.

    Args:
        mcp: FastMCP server instance
        workspace: Workspace holding the note index and open documents
    """

    @mcp.tool()
    def open_document(uri: str, text: str) -> dict:
        """Notify the server that a document was opened.

        Args:
            uri: Document URI
            text: Full document text

        Returns:
            The indexed note with:
            - identifier: Note identifier derived from the URI
            - headings: Number of headings extracted
        """
        return _note_summary(workspace.did_open(uri, text))

    @mcp.tool()
    def change_document(uri: str, text: str) -> dict:
        """Notify the server that a document changed.

        Args:
            uri: Document URI
            text: Full new document text

        Returns:
            The re-indexed note (identifier, number of headings).
        """
        return _note_summary(workspace.did_change(uri, text))

    @mcp.tool()
    def close_document(uri: str) -> dict:
        """Notify the server that a document was closed.

        The note stays available for completion.

        Args:
            uri: Document URI

        Returns:
            - uri: The document URI
            - closed: Whether the document was open
        """
        return {"uri": uri, "closed": workspace.did_close(uri)}

    @mcp.tool()
    def complete(
        uri: str,
        offset: int | None = None,
        line: int | None = None,
        character: int | None = None,
    ) -> list[dict]:
        """Complete a wiki-link at the cursor.

        Inside ``[[`` this lists every note; inside ``[[Note#`` it lists the
        headings of Note. Anywhere else the list is empty.

        Args:
            uri: URI of an open document
            offset: Cursor offset in the document text
            line: Zero-based cursor line, used with character when offset is not given
            character: Zero-based cursor column

        Returns:
            List of completion entries with label, kind and data.
        """
        if offset is None:
            if line is None:
                raise ValueError("Either offset or line must be given")
            text = workspace.document_text(uri)
            if text is None:
                return []
            offset = offset_at(text, line, character or 0)

        return [item.to_dict() for item in workspace.completion(uri, offset)]

    @mcp.tool()
    def resolve_completion(label: str, data: int, kind: str = TEXT_KIND) -> dict:
        """Add detail and documentation to an entry from the last completion list.

        Args:
            label: Entry label
            data: Entry data token
            kind: Entry kind

        Returns:
            The entry, with detail and documentation when they could be resolved.
        """
        item = CompletionItem(label=label, data=data, kind=kind)
        return workspace.resolve(item).to_dict()

    @mcp.tool()
    def list_notes() -> list[dict]:
        """List every indexed note.

        Returns:
            List of notes with:
            - identifier: Note identifier
            - headings: Heading titles in document order
        """
        return [
            {
                "identifier": note.identifier,
                "headings": [heading.title for heading in note.headings],
            }
            for note in workspace.index.all()
        ]

    @mcp.tool()
    def reindex() -> dict:
        """Walk the notes root again and re-index every note.

        Returns:
            - notes: Number of notes in the index
            - discovered: Number of files found on disk
            - truncated: Whether discovery stopped at a limit
        """
        result = workspace.reindex()
        return {
            "notes": len(workspace.index),
            "discovered": len(result),
            "truncated": result.truncated,
        }
