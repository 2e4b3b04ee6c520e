"""Filesystem template provider."""

from __future__ import annotations

import logging
from pathlib import Path

from ...ports.provider import ITemplateProvider

logger = logging.getLogger(__name__)


class FileSystemTemplateProvider(ITemplateProvider):
    """
    Loads template definitions from a directory.

    Every ``*.tmpl`` file is one definition; the file name without the
    extension is the template name, e.g. ``default.title.tmpl`` defines
    ``default.title``. Subdirectories are not scanned.
    """

    def __init__(self, templates_dir: Path | str, suffix: str = ".tmpl") -> None:
        self.templates_dir = Path(templates_dir)
        self.suffix = suffix

    async def load_all(self) -> dict[str, str]:
        if not self.templates_dir.is_dir():
            logger.warning(f"Template directory {self.templates_dir} does not exist")
            return {}

        templates: dict[str, str] = {}
        for path in sorted(self.templates_dir.iterdir()):
            if not path.is_file() or path.suffix != self.suffix:
                continue
            templates[path.name[: -len(self.suffix)]] = path.read_text(encoding="utf-8")
        logger.debug(f"Loaded {len(templates)} templates from {self.templates_dir}")
        return templates
