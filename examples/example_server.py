"""Example MCP server demonstrating the notes resource.

This example indexes a notes folder and serves only the resource and one tool.
Run with: uv run python examples/example_server.py /path/to/notes
"""

import sys

from fastmcp import FastMCP

from wikilink_mcp.config import Config
from wikilink_mcp.resources import register_resources
from wikilink_mcp.workspace import Workspace

# Index the notes folder given on the command line (or the current directory)
config = Config.from_env(root_override=sys.argv[1] if len(sys.argv) > 1 else None)
workspace = Workspace(config)
workspace.initialize()

# Create MCP server
mcp = FastMCP("wikilink-mcp-example")

# Register resources
register_resources(mcp, workspace)


@mcp.tool()
def headings_of(identifier: str) -> list[str]:
    """List the headings of one note.

    Args:
        identifier: Note identifier, e.g. "daily/2026-10-18"

    Returns:
        Heading titles in document order
    """
    return workspace.heading_titles(identifier)


if __name__ == "__main__":
    print("Starting wikilink-mcp example server...")
    print(f"\nIndexed {len(workspace.index)} notes under {config.notes_root}")
    print("\nAvailable resources:")
    print("  - wikilink://notes")
    print("\nAvailable tools:")
    print("  - headings_of")
    print("\nPress Ctrl+C to stop")

    mcp.run()
