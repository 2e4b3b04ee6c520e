"""Compiled, immutable set of named templates."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError

from ..ports.provider import ITemplateProvider
from ..primitives.exceptions import RenderError
from .context import TemplateContext
from .defaults import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedText:
    """Outcome of rendering one named template."""

    text: str
    error: RenderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TemplateSet:
    """
    Named templates compiled once at startup and read-only afterwards.

    Templates may invoke one another by name (``{% include "name" %}`` or
    ``{% from "name" import macro %}``). Undefined variables are errors, so a
    broken field surfaces as a :class:`RenderError` instead of silently
    rendering blank.

    A single instance is safe to share between concurrent dispatches: nothing
    is registered or mutated after construction.
    """

    def __init__(
        self,
        sources: Mapping[str, str] | None = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        merged: dict[str, str] = dict(DEFAULT_TEMPLATES) if include_defaults else {}
        merged.update(sources or {})
        self._sources: Mapping[str, str] = MappingProxyType(merged)
        self._env = Environment(
            loader=DictLoader(dict(merged)),
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._compiled: Mapping[str, Template] = MappingProxyType(
            {name: self._compile(name) for name in merged}
        )
        logger.debug(f"Compiled {len(self._compiled)} templates")

    @classmethod
    async def load(
        cls,
        provider: ITemplateProvider,
        *,
        include_defaults: bool = True,
    ) -> TemplateSet:
        """Build a template set from an external template source."""
        sources = await provider.load_all()
        return cls(sources, include_defaults=include_defaults)

    @property
    def sources(self) -> Mapping[str, str]:
        return self._sources

    def names(self) -> list[str]:
        return sorted(self._compiled)

    def __contains__(self, name: object) -> bool:
        return name in self._compiled

    def render(
        self,
        name: str,
        context: TemplateContext | Mapping[str, Any],
    ) -> RenderedText:
        """
        Render one named template.

        Never raises for template problems: unknown names, undefined variables
        and runtime failures are returned as ``RenderedText.error`` with empty text.
        """
        template = self._compiled.get(name)
        if template is None:
            return RenderedText("", RenderError(name, "template is not defined"))

        variables = context.variables if isinstance(context, TemplateContext) else context
        try:
            return RenderedText(template.render(**variables))
        except Exception as e:  # noqa: BLE001
            logger.debug(f"Template {name!r} failed to render: {e}")
            return RenderedText("", RenderError(name, str(e)))

    def _compile(self, name: str) -> Template:
        try:
            return self._env.get_template(name)
        except TemplateError as e:
            raise RenderError(name, str(e)) from e
