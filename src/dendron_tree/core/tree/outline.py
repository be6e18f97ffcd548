"""Render a note tree as a markdown outline."""

import io

from dendron_tree.core.tree.note_tree import NoteTree
from dendron_tree.models.note import Note


def _depth(note: Note) -> int:
    depth = 0
    parent = note.parent
    while parent is not None:
        depth += 1
        parent = parent.parent
    return depth


def render_outline(
    tree: NoteTree,
    *,
    max_depth: int | None = None,
    include_root: bool = False,
) -> str:
    """Render the tree as an indented markdown bullet list.

    Args:
        tree: The tree to render, in its current child order.
        max_depth: Max levels below the root to include (None = unlimited).
        include_root: Whether to emit a bullet for the root node itself.

    Returns:
        Markdown string with one bullet per note: title and dotted path.
        Structural nodes are rendered in italics.
    """
    out = io.StringIO()
    offset = 0 if include_root else 1

    for note in tree.flatten():
        depth = _depth(note)
        if depth < offset:
            continue
        if max_depth is not None and depth > max_depth:
            continue

        indent = "    " * (depth - offset)
        title = note.title if note.has_file else f"*{note.title}*"
        out.write(f"{indent}- {title} (`{note.get_path()}`)\n")

        # Truncation indicator when children are cut off by max_depth
        if max_depth is not None and depth == max_depth and note.child_count > 0:
            noun = "child" if note.child_count == 1 else "children"
            out.write(f"{indent}    - ... ({note.child_count} more {noun})\n")

    return out.getvalue()
