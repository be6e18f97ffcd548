"""Configuration constants for dendron-tree."""

import os
from pathlib import Path

# Only files with this extension are treated as notes.
NOTE_EXTENSION: str = "md"

# Base name that addresses the tree root itself.
ROOT_NAME: str = "root"

# Separator between hierarchy levels in a note's base name.
NAME_SEPARATOR: str = "."

# Environment variable that overrides the vault location.
VAULT_ENV_VAR: str = "DENDRON_VAULT"

# Vault directory. First directory which is found is used.
VAULT_DIRECTORIES: list[Path] = [
    Path("~/dendron/vault").expanduser(),
    Path("~/Documents/dendron").expanduser(),
    Path("~/.local/share/dendron-tree").expanduser(),
]


def resolve_vault_directory() -> Path:
    """Return the vault directory.

    ``$DENDRON_VAULT`` wins when set. Otherwise the first existing entry of
    VAULT_DIRECTORIES is used, falling back to the first candidate.
    """
    override = os.environ.get(VAULT_ENV_VAR)
    if override:
        return Path(override).expanduser()
    for candidate in VAULT_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return VAULT_DIRECTORIES[0]
