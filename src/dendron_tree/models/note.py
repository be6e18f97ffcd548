"""Domain model for a node of the note hierarchy."""

import weakref
from dataclasses import dataclass, field
from pathlib import Path

from dendron_tree.config import NAME_SEPARATOR, ROOT_NAME
from dendron_tree.core.title import generate_title
from dendron_tree.exceptions import StructuralViolationError


@dataclass(eq=False)
class Note:
    """A single node in the note tree.

    ``name`` keeps the casing of the first segment that created the node;
    matching against siblings always goes through ``key``. ``file`` is the
    backing file, or None for a structural node that only exists because a
    descendant's dotted name implies it.
    """

    name: str
    title: str = ""
    file: Path | None = None
    children: list["Note"] = field(default_factory=list)
    _parent: "weakref.ref[Note] | None" = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.title:
            self.title = generate_title(self.name)

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def parent(self) -> "Note | None":
        return self._parent() if self._parent is not None else None

    @property
    def has_file(self) -> bool:
        return self.file is not None

    @property
    def child_count(self) -> int:
        return len(self.children)

    def append_child(self, note: "Note") -> None:
        """Attach ``note`` as the last child of this node."""
        if note.parent is not None:
            msg = f"Note {note.name!r} already has parent {note.parent.name!r}"
            raise StructuralViolationError(msg)
        note._parent = weakref.ref(self)
        self.children.append(note)

    def remove_child(self, note: "Note") -> None:
        """Detach ``note`` from this node. Unknown children are ignored."""
        for i, child in enumerate(self.children):
            if child is note:
                del self.children[i]
                note._parent = None
                return

    def find_child(self, name: str) -> "Note | None":
        """Return the direct child matching ``name`` case-insensitively."""
        lower = name.lower()
        for child in self.children:
            if child.key == lower:
                return child
        return None

    def sort_children(self, *, recursive: bool = False) -> None:
        self.children.sort(key=lambda note: note.key)
        if recursive:
            for child in self.children:
                child.sort_children(recursive=True)

    def get_path(self) -> str:
        """Return the dotted name of this node.

        Ancestor names are joined with ``.``, excluding the root. The root
        itself renders as ``"root"``.
        """
        components: list[str] = []
        current: Note | None = self
        while current is not None and current.parent is not None:
            components.append(current.name)
            current = current.parent
        if not components:
            return ROOT_NAME
        return NAME_SEPARATOR.join(reversed(components))

    def sync_metadata(self, title: str | None) -> None:
        """Apply an externally resolved title.

        Structural nodes have nothing to sync. An absent or empty title falls
        back to the one generated from the node name.
        """
        if self.file is None:
            return
        self.title = title if title else generate_title(self.name)
