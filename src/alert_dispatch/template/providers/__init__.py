"""Template provider implementations."""

from __future__ import annotations

from .filesystem import FileSystemTemplateProvider
from .memory import InMemoryTemplateProvider

__all__ = ["InMemoryTemplateProvider", "FileSystemTemplateProvider"]
