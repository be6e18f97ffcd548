"""Hierarchical index of dendron-style dotted notes."""

from dendron_tree.core.title import generate_title, note_template
from dendron_tree.core.tree.note_tree import NoteTree
from dendron_tree.models.note import Note
from dendron_tree.protocols import TitleResolverProtocol
from dendron_tree.vault import DendronVault

__all__ = [
    "DendronVault",
    "Note",
    "NoteTree",
    "TitleResolverProtocol",
    "generate_title",
    "note_template",
]
