"""Exceptions raised by the note tree and the vault layer."""


class DendronTreeError(Exception):
    """Base class for all dendron-tree errors."""


class StructuralViolationError(DendronTreeError):
    """A node was attached to a second parent.

    This is a programming error: nodes are created and attached by the tree
    itself, so a node that already has a parent must never be appended again.
    """


class InvalidVaultRootError(DendronTreeError):
    """The configured vault root is missing or is not a directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Vault root {path!r} is not a directory")
