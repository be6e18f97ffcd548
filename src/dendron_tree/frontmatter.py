"""Resolve note titles from YAML frontmatter."""

import re
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

# YAML front-matter block
_FRONTMATTER_RE = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)", re.DOTALL)


def parse_frontmatter(content: str) -> dict[str, Any]:
    """Return the YAML front-matter of ``content`` as a dict.

    Missing, empty, non-mapping or invalid front-matter yields ``{}``.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}
    try:
        meta = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        logger.warning("Invalid frontmatter: {}", exc)
        return {}
    return meta if isinstance(meta, dict) else {}


class FrontmatterTitleResolver:
    """Read the ``title`` key from a note's frontmatter."""

    def resolve_title(self, path: Path) -> str | None:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read {}: {}", path, exc)
            return None

        title = parse_frontmatter(content).get("title")
        if title is None:
            return None
        return str(title)
