"""Keep a NoteTree in sync with a folder of dotted markdown files."""

from pathlib import Path

from loguru import logger

from dendron_tree.config import NOTE_EXTENSION
from dendron_tree.core.title import generate_title, note_template
from dendron_tree.core.tree.note_tree import NoteTree
from dendron_tree.exceptions import InvalidVaultRootError
from dendron_tree.frontmatter import FrontmatterTitleResolver
from dendron_tree.models.note import Note
from dendron_tree.protocols import TitleResolverProtocol


class DendronVault:
    """A vault folder whose top-level notes form one NoteTree.

    The host reports file-system events through the ``on_*`` methods; each
    returns True when the event concerned a note and was applied.
    """

    def __init__(
        self,
        path: str | Path,
        resolver: TitleResolverProtocol | None = None,
    ) -> None:
        self.path = Path(path)
        self.resolver = resolver or FrontmatterTitleResolver()
        self.tree = NoteTree()
        self.is_initialized = False
        self.logger = logger.bind(vault=self.formatted_path)

    @property
    def formatted_path(self) -> str:
        text = str(self.path)
        return "/" if text in ("", ".") else text

    def is_note(self, path: Path) -> bool:
        return path.suffix == f".{NOTE_EXTENSION}"

    def init(self) -> None:
        """Build the tree from the vault folder. Later calls are no-ops."""
        if self.is_initialized:
            return

        if not self.path.is_dir():
            raise InvalidVaultRootError(str(self.path))

        self.tree = NoteTree()
        count = 0
        for child in self.path.iterdir():
            if child.is_file() and self.is_note(child):
                self.tree.insert(child, child.stem, self.resolver.resolve_title(child))
                count += 1

        self.tree.sort()
        self.is_initialized = True
        self.logger.info("Loaded {} notes", count)

    def create_root_folder(self) -> Path:
        self.path.mkdir(parents=True, exist_ok=True)
        return self.path

    def create_note(self, base_name: str) -> Path:
        """Write a new note file with the default template.

        The caller reports the new file through ``on_file_created``.

        Raises:
            FileExistsError: A note with this name already exists.
        """
        file_path = self.path / f"{base_name}.{NOTE_EXTENSION}"
        if file_path.exists():
            msg = f"Note already exists: {file_path}"
            raise FileExistsError(msg)

        file_path.write_text(note_template(generate_title(base_name)), encoding="utf-8")
        self.logger.debug("Created {}", file_path)
        return file_path

    def on_file_created(self, path: Path) -> bool:
        if not self.is_note(path):
            return False

        note = self.tree.insert(path, path.stem, resort=True)
        note.sync_metadata(self.resolver.resolve_title(path))
        self.logger.debug("Added {}", note.get_path())
        return True

    def on_metadata_changed(self, path: Path) -> bool:
        if not self.is_note(path):
            return False

        note = self.tree.lookup(path.stem)
        if note is None:
            return False

        note.sync_metadata(self.resolver.resolve_title(path))
        return True

    def on_file_deleted(self, path: Path) -> bool:
        if not self.is_note(path):
            return False

        self.tree.delete_by_name(path.stem)
        note = self.tree.lookup(path.stem)
        if note is not None and note.file is None:
            # Survives as a structural node or is the root; drop the frontmatter title.
            note.title = generate_title(note.name)
        self.logger.debug("Removed {}", path.stem)
        return True

    def on_file_renamed(self, old_path: Path, new_path: Path) -> bool:
        deleted = self.on_file_deleted(old_path)
        created = self.on_file_created(new_path)
        return deleted or created

    def get_note(self, base_name: str) -> Note | None:
        return self.tree.lookup(base_name)
