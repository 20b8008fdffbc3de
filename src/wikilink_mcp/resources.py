"""MCP Resources for wikilink-mcp.

Resources expose the note index as read-only markdown.
"""

from wikilink_mcp.workspace import Workspace


def get_notes_resource(workspace: Workspace) -> str:
    """Resource: wikilink://notes

    Lists all indexed notes with their headings.
    """
    notes = workspace.index.all()

    result_lines = ["# Notes\n"]
    result_lines.append(f"Root: `{workspace.root_uri}`\n")
    result_lines.append(f"Total notes: {len(notes)}\n")
    result_lines.append("\n")

    for note in notes:
        result_lines.append(f"## {note.identifier}\n")
        if note.metadata.title:
            result_lines.append(f"- Title: {note.metadata.title}\n")
        if note.metadata.tags:
            result_lines.append(f"- Tags: {', '.join(note.metadata.tags)}\n")
        for heading in note.headings:
            result_lines.append(f"- [[{note.identifier}#{heading.title}]]\n")
        result_lines.append("\n")

    return "".join(result_lines)


def register_resources(mcp, workspace: Workspace):
    """Register all resources with the FastMCP server.

    Args:
        mcp: FastMCP server instance
        workspace: Workspace holding the note index
    """

    @mcp.resource("wikilink://notes")
    def list_notes():
        """List all indexed notes with their headings."""
        return get_notes_resource(workspace)
