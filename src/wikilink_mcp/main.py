"""Main entry point for the wikilink-mcp server."""

import argparse
import logging
import sys

from fastmcp import FastMCP

from wikilink_mcp.config import Config
from wikilink_mcp.resources import register_resources
from wikilink_mcp.tools import register_tools
from wikilink_mcp.workspace import Workspace

logger = logging.getLogger(__name__)


def create_server(config: Config) -> FastMCP:
    """Create and configure the MCP server with all components.

    Args:
        config: Configuration instance with all settings.
    """
    mcp = FastMCP(
        name="wikilinkMCP",
        instructions=(
            "wikilinkMCP completes wiki-style links ([[Note]] and [[Note#Heading]]) "
            "across a folder of markdown notes. Send open_document and change_document "
            "as the editor's documents change, then call complete with the cursor "
            "position to get note or heading suggestions."
        ),
    )

    workspace = Workspace(config)

    logger.info("Indexing notes under %s", config.notes_root)
    result = workspace.initialize()
    if result.truncated:
        logger.warning("Initial discovery was truncated; some notes are missing")
    logger.info("Initial index complete: %d notes indexed", len(workspace.index))

    logger.info("Registering resources...")
    register_resources(mcp, workspace)

    logger.info("Registering tools...")
    register_tools(mcp, workspace)

    logger.info("Server configured successfully")
    return mcp


def main() -> None:
    """Main function - starts the MCP server."""
    # Configure logging here to avoid side effects on import
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="wikilinkMCP - wiki-link completion for markdown notes"
    )
    parser.add_argument(
        "--root",
        help="Notes root directory (overrides WIKILINK_ROOT)",
    )
    parser.add_argument(
        "--extension",
        help="Note file extension, e.g. .md (overrides WIKILINK_EXTENSION)",
    )
    args = parser.parse_args()

    config = Config.from_env(root_override=args.root, extension_override=args.extension)

    logger.info("=" * 50)
    logger.info("wikilinkMCP starting...")
    logger.info("  ROOT:        %s", config.notes_root)
    logger.info("  EXTENSION:   %s", config.note_extension)
    logger.info("  MAX_DEPTH:   %s", config.max_depth)
    logger.info("  MAX_ENTRIES: %s", config.max_entries)
    logger.info("  TRANSPORT:   %s", config.transport)
    logger.info("=" * 50)

    try:
        mcp = create_server(config)
        if config.transport == "stdio":
            logger.info("Starting MCP server on stdio...")
            mcp.run(transport="stdio")
        else:
            logger.info("Starting MCP server on port %s...", config.port)
            mcp.run(transport=config.transport, host="0.0.0.0", port=config.port)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        sys.exit(0)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
