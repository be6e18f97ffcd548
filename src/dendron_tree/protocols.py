"""Protocols for dependency injection in the vault layer."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TitleResolverProtocol(Protocol):
    """Protocol for resolving a note's title from its metadata."""

    def resolve_title(self, path: Path) -> str | None:
        """Return the explicit title of the note at ``path``, or None."""
        ...
