"""Display titles and default content for new notes."""

import time

import yaml

from dendron_tree.config import NAME_SEPARATOR


def generate_title(path: str) -> str:
    """Derive a display title from the last segment of a dotted name.

    The segment is split on ``-``, blank pieces are dropped and every word is
    capitalized: ``"project.my-cool-note"`` becomes ``"My Cool Note"``.
    An empty final segment yields an empty title.
    """
    segment = path[path.rfind(NAME_SEPARATOR) + 1 :]
    words = [piece.strip() for piece in segment.split("-")]
    return " ".join(word[0].upper() + word[1:].lower() for word in words if word)


def note_template(title: str, *, timestamp: int | None = None) -> str:
    """Return the initial content of a new note file.

    ``created`` and ``updated`` are milliseconds since the epoch.
    """
    now = timestamp if timestamp is not None else int(time.time() * 1000)
    header = yaml.safe_dump(
        {"title": title, "updated": now, "created": now},
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )
    return f"---\n{header}---\n\n"
