"""Main indexer that feeds discovered and edited notes into the note index."""

import logging
from pathlib import Path
from urllib.parse import quote, unquote, urlparse

from wikilink_mcp.indexer.index import NoteIndex
from wikilink_mcp.indexer.models import Note
from wikilink_mcp.indexer.parser import derive_identifier, extract_headings, parse_frontmatter
from wikilink_mcp.indexer.walker import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_ENTRIES,
    FileInfo,
    WalkResult,
    walk_notes_root,
)

logger = logging.getLogger(__name__)


def resolve_root(root: str | Path) -> tuple[Path, str]:
    """
    Resolve a root given as a filesystem path or a ``file://`` URI.

    Returns:
        Tuple of (filesystem path, root URI). A URI is kept exactly as given so
        that identifiers derived from editor URIs line up with it.
    """
    root_str = str(root)
    if root_str.startswith("file://"):
        return Path(unquote(urlparse(root_str).path)), root_str
    path = Path(root_str).expanduser().resolve()
    return path, path.as_uri()


class Indexer:
    """
    Indexer that keeps a NoteIndex in step with the notes root and open documents.

    Two paths feed the same index: ``reindex`` walks the notes root on disk,
    and ``index_document`` takes the full text of an opened or edited document.
    Every call reprocesses the whole text it is given.
    """

    def __init__(
        self,
        index: NoteIndex,
        root: str | Path | None = None,
        extension: str = ".md",
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        """
        Initialize the indexer.

        Args:
            index: The note index to write into
            root: Notes root as a path or file URI; can be set later with set_root
            extension: Note file extension, e.g. ".md"
            max_depth: Directory depth limit for discovery
            max_entries: Directory entry limit for discovery
        """
        self.index = index
        self.extension = extension
        self.max_depth = max_depth
        self.max_entries = max_entries
        self.root_path: Path | None = None
        self.root_uri = "/"
        if root is not None:
            self.set_root(root)

    def set_root(self, root: str | Path) -> None:
        """Set the notes root used for discovery and identifier derivation."""
        self.root_path, self.root_uri = resolve_root(root)
        logger.debug("Notes root set to %s (%s)", self.root_path, self.root_uri)

    def file_uri(self, file_info: FileInfo) -> str:
        """Build the URI of a discovered file, relative to the root URI."""
        base = self.root_uri if self.root_uri.endswith("/") else self.root_uri + "/"
        return base + quote(file_info.relative_path)

    def identifier_for(self, uri: str) -> str:
        return derive_identifier(uri, self.root_uri, self.extension)

    def reindex(self) -> WalkResult:
        """
        Discover every note under the root and index it.

        Returns the walk result; ``truncated`` is set when a discovery limit was hit.
        """
        if self.root_path is None:
            logger.warning("No notes root configured, skipping discovery")
            return WalkResult()

        logger.info("Discovering notes under %s", self.root_path)
        result = walk_notes_root(
            self.root_path,
            extension=self.extension,
            max_depth=self.max_depth,
            max_entries=self.max_entries,
        )

        count = 0
        for file_info in result:
            if self._index_file(file_info) is not None:
                count += 1

        if result.truncated:
            logger.warning(
                "Discovery truncated: %d notes indexed before hitting a limit", count
            )
        else:
            logger.info("Discovery complete: %d notes indexed", count)
        return result

    def index_document(self, uri: str, text: str) -> Note:
        """Index the full text of a document, replacing any earlier headings."""
        identifier = self.identifier_for(uri)
        headings = extract_headings(text)
        metadata = parse_frontmatter(text, uri)
        note = self.index.upsert(identifier, headings, uri=uri, metadata=metadata)
        logger.debug("Indexed %s: %d headings", identifier, len(headings))
        return note

    def _index_file(self, file_info: FileInfo) -> Note | None:
        """Index a single discovered file."""
        try:
            content = file_info.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(
                "Skipping file with invalid UTF-8 encoding: %s (%s)",
                file_info.relative_path,
                e,
            )
            return None
        except OSError as e:
            logger.warning("Cannot read %s: %s", file_info.relative_path, e)
            return None

        return self.index_document(self.file_uri(file_info), content)
