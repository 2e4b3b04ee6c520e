"""Template provider port for external template sources."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ITemplateProvider(Protocol):
    """
    Protocol for loading named template definitions from external sources.

    Implementations: InMemoryTemplateProvider, FileSystemTemplateProvider.
    """

    async def load_all(self) -> dict[str, str]:
        """Return template sources keyed by template name."""
        ...
