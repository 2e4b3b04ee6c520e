"""In-memory template provider for inline definitions and tests."""

from __future__ import annotations

from collections.abc import Mapping

from ...ports.provider import ITemplateProvider


class InMemoryTemplateProvider(ITemplateProvider):
    """Serves template sources from a mapping of name to source."""

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates: dict[str, str] = dict(templates or {})

    async def load_all(self) -> dict[str, str]:
        return dict(self._templates)

    def add(self, name: str, source: str) -> None:
        """Add or replace a definition before the template set is compiled."""
        self._templates[name] = source
