"""In-memory note hierarchy built from dotted file names."""

from collections.abc import Iterator
from pathlib import Path

from dendron_tree.config import NAME_SEPARATOR, ROOT_NAME
from dendron_tree.models.note import Note


def split_name(name: str) -> list[str]:
    """Split a dotted base name into its segments.

    Consecutive, leading or trailing separators produce empty segments, which
    are kept as literal empty-named nodes.
    """
    return name.split(NAME_SEPARATOR)


def is_root_path(path: list[str]) -> bool:
    """Return True when ``path`` addresses the root itself.

    The sentinel matches case-insensitively, like every other segment, so
    ``Root`` and ``ROOT`` address the root too.
    """
    return len(path) == 1 and path[0].lower() == ROOT_NAME


class NoteTree:
    """A rooted, ordered tree of notes keyed by dotted names.

    Nodes for intermediate segments are created on demand by ``insert`` and
    pruned again by ``delete_by_name`` once they back no file and hold no
    children. Children are only sorted when asked to: either locally while
    inserting (``resort=True``) or globally through ``sort``.

    The tree is not thread-safe; callers must serialize mutations.
    """

    def __init__(self) -> None:
        self.root = Note(ROOT_NAME)

    def insert(
        self,
        file: Path,
        base_name: str,
        title: str | None = None,
        *,
        resort: bool = False,
    ) -> Note:
        """Attach ``file`` to the node addressed by ``base_name``.

        Missing ancestors are created as structural nodes. Re-inserting an
        existing name overwrites its file without duplicating the node.

        Args:
            file: Backing file of the note.
            base_name: Dotted name, e.g. ``"project.backend.api"``.
            title: Externally resolved title; the generated one is used if absent.
            resort: Re-sort the direct children of every node that gains a child.

        Returns:
            The target node.
        """
        path = split_name(base_name)
        current = self.root

        if not is_root_path(path):
            for segment in path:
                note = current.find_child(segment)
                if note is None:
                    note = Note(segment)
                    current.append_child(note)
                    if resort:
                        current.sort_children()
                current = note

        current.file = file
        current.sync_metadata(title)
        return current

    def lookup(self, base_name: str) -> Note | None:
        """Return the node addressed by ``base_name``, or None."""
        path = split_name(base_name)
        if is_root_path(path):
            return self.root

        current = self.root
        for segment in path:
            found = current.find_child(segment)
            if found is None:
                return None
            current = found
        return current

    def delete_by_name(self, base_name: str) -> None:
        """Detach the file of ``base_name`` and prune emptied ancestors.

        The node survives as a structural node while it still has children.
        Otherwise it is removed, and so is every ancestor left without a file
        and without children. The root is never removed.
        """
        note = self.lookup(base_name)
        if note is None:
            return

        note.file = None
        if note.children:
            return

        current: Note | None = note
        while current is not None and current.file is None and not current.children:
            parent = current.parent
            if parent is None:
                break
            parent.remove_child(current)
            current = parent

    def sync_metadata(self, base_name: str, title: str | None) -> Note | None:
        """Re-apply a resolved title to an existing node.

        Returns the node, or None if ``base_name`` is not in the tree.
        """
        note = self.lookup(base_name)
        if note is not None:
            note.sync_metadata(title)
        return note

    def sort(self) -> None:
        """Sort the children of every node by case-insensitive name."""
        self.root.sort_children(recursive=True)

    @staticmethod
    def _walk(note: Note) -> Iterator[Note]:
        # Iterative: hierarchy depth is unbounded.
        stack = [note]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def flatten(self) -> list[Note]:
        """Return every node in pre-order, root first, in current child order."""
        return list(self._walk(self.root))

    def __len__(self) -> int:
        """Number of nodes below the root."""
        return sum(1 for _ in self._walk(self.root)) - 1
