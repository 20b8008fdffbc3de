"""Tests for the workspace: open documents, events and completion requests."""

from pathlib import Path

import pytest

from wikilink_mcp.config import Config
from wikilink_mcp.workspace import Workspace, offset_at


@pytest.fixture
def notes_root(tmp_path: Path) -> Path:
    (tmp_path / "alpha.md").write_text("# Alpha\n## Goals\n")
    (tmp_path / "beta.md").write_text("# Beta\n")
    return tmp_path


@pytest.fixture
def workspace(notes_root: Path, monkeypatch) -> Workspace:
    monkeypatch.setenv("WIKILINK_ROOT", str(notes_root))
    ws = Workspace(Config.from_env())
    ws.initialize()
    return ws


def _uri(root: Path, name: str) -> str:
    return (root / name).resolve().as_uri()


class TestOffsetAt:
    def test_first_line(self):
        assert offset_at("hello\nworld", 0, 3) == 3

    def test_second_line(self):
        assert offset_at("hello\nworld", 1, 2) == 8

    def test_character_clamped_to_line_end(self):
        assert offset_at("hi\nthere", 0, 50) == 2

    def test_line_past_end(self):
        assert offset_at("one\ntwo", 5, 0) == 7

    def test_crlf_line_end(self):
        assert offset_at("ab\r\ncd", 0, 10) == 2
        assert offset_at("ab\r\ncd", 1, 1) == 5

    def test_negative_line(self):
        assert offset_at("abc", -1, 2) == 0


class TestInitialize:
    def test_discovers_notes(self, workspace: Workspace):
        assert workspace.index.identifiers() == ["alpha", "beta"]

    def test_root_as_uri(self, notes_root: Path):
        ws = Workspace(Config.from_env(root_override=str(notes_root)))
        ws.initialize(notes_root.resolve().as_uri())
        assert ws.index.identifiers() == ["alpha", "beta"]
        assert ws.root_uri == notes_root.resolve().as_uri()


class TestDocumentEvents:
    def test_open_then_complete_file_link(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "gamma.md")
        workspace.did_open(uri, "# Gamma\nSee [[")

        items = workspace.completion(uri, len("# Gamma\nSee [["))
        assert [i.label for i in items] == ["alpha", "beta", "gamma"]

    def test_complete_heading_link(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "beta.md")
        text = "# Beta\nSee [[alpha#"
        workspace.did_open(uri, text)

        items = workspace.completion(uri, len(text))
        assert [i.label for i in items] == ["Alpha", "Goals"]

    def test_change_replaces_headings(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "alpha.md")
        workspace.did_open(uri, "# Alpha\n## Goals\n")
        workspace.did_change(uri, "# Alpha\n## Retro\n## Next\n")

        assert [h.title for h in workspace.index.lookup("alpha").headings] == [
            "Alpha",
            "Retro",
            "Next",
        ]
        assert len(workspace.index) == 2

    def test_close_keeps_note(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "scratch.md")
        workspace.did_open(uri, "# Scratch")

        assert workspace.did_close(uri) is True
        assert workspace.document_text(uri) is None
        assert workspace.index.lookup("scratch") is not None

    def test_close_unopened(self, workspace: Workspace):
        assert workspace.did_close("file:///nowhere.md") is False

    def test_completion_for_unopened_document(self, workspace: Workspace):
        assert workspace.completion("file:///nowhere.md", 0) == []

    def test_completion_outside_link(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "beta.md")
        workspace.did_open(uri, "[[alpha]] done")
        assert workspace.completion(uri, 14) == []

    def test_reindex_keeps_open_document_text(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "alpha.md")
        workspace.did_change(uri, "# Unsaved")

        result = workspace.reindex()

        assert len(result) == 2
        assert [h.title for h in workspace.index.lookup("alpha").headings] == ["Unsaved"]

    def test_resolve_after_completion(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "beta.md")
        text = "[[alpha#"
        workspace.did_open(uri, text)

        item = workspace.completion(uri, len(text))[1]
        resolved = workspace.resolve(item)
        assert resolved.detail == "alpha#Goals"

    def test_complete_headings_of_note_with_space(self, workspace: Workspace, notes_root: Path):
        (notes_root / "My Note.md").write_text("# Intro\n## Goals\n")
        workspace.reindex()
        uri = _uri(notes_root, "other.md")
        text = "See [[My Note#"
        workspace.did_open(uri, text)

        items = workspace.completion(uri, len(text))
        assert [i.label for i in items] == ["Intro", "Goals"]

        file_items = workspace.completion(uri, len("See [["))
        assert "My Note" in [i.label for i in file_items]


class TestHeadingTitles:
    def test_lists_titles(self, workspace: Workspace):
        assert workspace.heading_titles("alpha") == ["Alpha", "Goals"]

    def test_unknown_note(self, workspace: Workspace):
        assert workspace.heading_titles("missing") == []

    def test_does_not_disturb_pending_resolve(self, workspace: Workspace, notes_root: Path):
        uri = _uri(notes_root, "beta.md")
        workspace.did_open(uri, "[[")
        item = workspace.completion(uri, 2)[0]

        workspace.heading_titles("alpha")

        assert workspace.resolve(item).detail == "2 headings"
