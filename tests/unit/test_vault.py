"""Tests for DendronVault: initial load and file-system event handling."""

from pathlib import Path

import pytest

from dendron_tree.exceptions import InvalidVaultRootError
from dendron_tree.vault import DendronVault
from tests.unit.fakes import FakeResolver


def _paths(vault: DendronVault) -> list[str]:
    return [n.get_path() for n in vault.tree.flatten()]


def test_init_loads_top_level_notes_sorted(vault: DendronVault) -> None:
    assert _paths(vault) == [
        "root",
        "Daily",
        "Daily.2024-01-02",
        "project",
        "project.backend",
        "project.backend.api",
        "project.frontend",
    ]
    assert vault.is_initialized is True


def test_init_resolves_frontmatter_titles(vault: DendronVault) -> None:
    assert vault.tree.root.title == "Home"
    assert vault.get_note("project").title == "Projects"
    assert vault.get_note("project.backend.api").title == "REST API"
    assert vault.get_note("project.frontend").title == "Frontend"
    assert vault.get_note("project.backend").file is None


def test_init_ignores_non_notes_and_subfolders(vault: DendronVault) -> None:
    assert vault.get_note("readme") is None
    assert vault.get_note("nested") is None
    assert vault.get_note("assets") is None


def test_init_is_idempotent(vault_dir: Path) -> None:
    resolver = FakeResolver()
    vault = DendronVault(vault_dir, resolver)
    vault.init()
    calls = len(resolver.calls)
    tree = vault.tree

    vault.init()

    assert len(resolver.calls) == calls
    assert vault.tree is tree


def test_init_rejects_missing_root(tmp_path: Path) -> None:
    vault = DendronVault(tmp_path / "missing")

    with pytest.raises(InvalidVaultRootError, match="not a directory"):
        vault.init()
    assert vault.is_initialized is False


def test_init_with_injected_resolver(vault_dir: Path) -> None:
    resolver = FakeResolver()
    resolver.set_title("project.frontend", "UI")
    vault = DendronVault(vault_dir, resolver)
    vault.init()

    assert vault.get_note("project.frontend").title == "UI"
    assert vault.get_note("project").title == "Project"
    assert len(resolver.calls) == 5


def test_formatted_path(tmp_path: Path) -> None:
    assert DendronVault("").formatted_path == "/"
    assert DendronVault(tmp_path).formatted_path == str(tmp_path)


def test_create_root_folder(tmp_path: Path) -> None:
    vault = DendronVault(tmp_path / "new" / "vault")
    created = vault.create_root_folder()
    assert created.is_dir()


def test_create_note_writes_template(vault: DendronVault) -> None:
    path = vault.create_note("project.my-new-note")

    assert path == vault.path / "project.my-new-note.md"
    content = path.read_text(encoding="utf-8")
    assert content.startswith("---\ntitle: My New Note\n")
    assert "created: " in content


def test_create_note_refuses_overwrite(vault: DendronVault) -> None:
    with pytest.raises(FileExistsError):
        vault.create_note("project")


def test_on_file_created_inserts_sorted(vault: DendronVault) -> None:
    path = vault.create_note("project.api-docs")

    assert vault.on_file_created(path) is True

    project = vault.get_note("project")
    assert [n.name for n in project.children] == ["api-docs", "backend", "frontend"]
    assert vault.get_note("project.api-docs").title == "Api Docs"


def test_on_file_created_ignores_non_notes(vault: DendronVault) -> None:
    path = vault.path / "image.png"
    path.write_bytes(b"")

    assert vault.on_file_created(path) is False
    assert vault.get_note("image") is None


def test_on_file_created_existing_structural_node(vault: DendronVault) -> None:
    path = vault.path / "project.backend.md"
    path.write_text("---\ntitle: Server Side\n---\n", encoding="utf-8")

    assert vault.on_file_created(path) is True

    note = vault.get_note("project.backend")
    assert note.file == path
    assert note.title == "Server Side"
    assert vault.get_note("project").child_count == 2


def test_on_metadata_changed_updates_title(vault: DendronVault) -> None:
    path = vault.path / "project.frontend.md"
    path.write_text("---\ntitle: Web Client\n---\n", encoding="utf-8")

    assert vault.on_metadata_changed(path) is True
    assert vault.get_note("project.frontend").title == "Web Client"

    path.write_text("plain\n", encoding="utf-8")
    assert vault.on_metadata_changed(path) is True
    assert vault.get_note("project.frontend").title == "Frontend"


def test_on_metadata_changed_unknown_note(vault: DendronVault) -> None:
    assert vault.on_metadata_changed(vault.path / "unknown.md") is False
    assert vault.on_metadata_changed(vault.path / "readme.txt") is False


def test_on_file_deleted_prunes(vault: DendronVault) -> None:
    path = vault.path / "project.backend.api.md"
    path.unlink()

    assert vault.on_file_deleted(path) is True

    assert vault.get_note("project.backend") is None
    assert vault.get_note("project") is not None


def test_on_file_deleted_keeps_structural_with_generated_title(vault: DendronVault) -> None:
    path = vault.path / "project.md"
    path.unlink()

    assert vault.on_file_deleted(path) is True

    project = vault.get_note("project")
    assert project is not None
    assert project.file is None
    assert project.title == "Project"


def test_on_file_deleted_ignores_non_notes(vault: DendronVault) -> None:
    assert vault.on_file_deleted(vault.path / "readme.txt") is False


def test_on_file_renamed_moves_note(vault: DendronVault) -> None:
    old = vault.path / "project.frontend.md"
    new = vault.path / "archive.frontend.md"
    old.rename(new)

    assert vault.on_file_renamed(old, new) is True

    assert vault.get_note("project.frontend") is None
    moved = vault.get_note("archive.frontend")
    assert moved is not None
    assert moved.file == new
    assert [n.name for n in vault.tree.root.children] == ["archive", "Daily", "project"]


def test_on_file_deleted_root_resets_title(vault: DendronVault) -> None:
    path = vault.path / "root.md"
    path.unlink()

    assert vault.on_file_deleted(path) is True

    assert vault.tree.root.file is None
    assert vault.tree.root.title == "Root"
