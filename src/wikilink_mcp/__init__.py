"""
wikilink-mcp - wiki-link completion for a folder of markdown notes.

Indexes the headings of every note and completes [[Note]] and [[Note#Heading]]
links at the editor's cursor, served over MCP.

Stack:
- Python + FastMCP (official MCP SDK)
- PyYAML (frontmatter)
- Markdown (source of truth)
"""

__version__ = "0.1.0"
