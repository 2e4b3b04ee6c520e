"""Template rendering: compiled template set, context, defaults and sources."""

from __future__ import annotations

from .context import TemplateContext
from .defaults import DEFAULT_MESSAGE_TEMPLATE, DEFAULT_TEMPLATES, DEFAULT_TITLE_TEMPLATE
from .providers.filesystem import FileSystemTemplateProvider
from .providers.memory import InMemoryTemplateProvider
from .registry import RenderedText, TemplateSet

__all__ = [
    "DEFAULT_MESSAGE_TEMPLATE",
    "DEFAULT_TEMPLATES",
    "DEFAULT_TITLE_TEMPLATE",
    "FileSystemTemplateProvider",
    "InMemoryTemplateProvider",
    "RenderedText",
    "TemplateContext",
    "TemplateSet",
]
