"""Shared test fixtures."""

from pathlib import Path

import pytest

from dendron_tree.vault import DendronVault

VAULT_FILES = {
    "root.md": '---\ntitle: "Home"\n---\n',
    "project.md": "---\ntitle: Projects\n---\n",
    "project.backend.api.md": "---\ntitle: REST API\n---\nEndpoints.\n",
    "project.frontend.md": "No frontmatter here.\n",
    "Daily.2024-01-02.md": "---\nupdated: 1\n---\n",
    "readme.txt": "not a note",
}


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Return a vault directory populated with VAULT_FILES."""
    root = tmp_path / "vault"
    root.mkdir()
    for name, content in VAULT_FILES.items():
        (root / name).write_text(content, encoding="utf-8")
    (root / "assets").mkdir()
    (root / "assets" / "nested.md").write_text("ignored", encoding="utf-8")
    return root


@pytest.fixture
def vault(vault_dir: Path) -> DendronVault:
    """Return an initialized vault over vault_dir."""
    v = DendronVault(vault_dir)
    v.init()
    return v
