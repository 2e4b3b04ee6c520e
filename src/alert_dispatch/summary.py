"""Alert batch summarizer: aggregate status plus the rendered title and message."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .alerts import AlertBatch, AlertStatus
from .config import DispatchSettings
from .primitives.exceptions import RenderError
from .template.context import TemplateContext
from .template.defaults import DEFAULT_MESSAGE_TEMPLATE, DEFAULT_TITLE_TEMPLATE
from .template.registry import TemplateSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchSummary:
    """What a notifier needs to build its payload for one batch."""

    status: AlertStatus
    title: str
    message: str
    context: TemplateContext
    errors: tuple[RenderError, ...] = ()

    @property
    def batch(self) -> AlertBatch:
        return self.context.batch

    @property
    def settings(self) -> DispatchSettings:
        return self.context.settings

    @property
    def is_resolved(self) -> bool:
        return self.status is AlertStatus.RESOLVED


class Summarizer:
    """
    Derives the aggregate status of a batch and renders its title and message.

    Rendering failures degrade to empty fields: each failure is recorded on
    ``BatchSummary.errors`` and logged, never raised, and never affects the
    other field.
    """

    def __init__(self, templates: TemplateSet, settings: DispatchSettings | None = None) -> None:
        self.templates = templates
        self.settings = settings or DispatchSettings()

    def summarize(
        self,
        batch: AlertBatch,
        *,
        receiver: str = "",
        title_template: str = DEFAULT_TITLE_TEMPLATE,
        message_template: str = DEFAULT_MESSAGE_TEMPLATE,
    ) -> BatchSummary:
        context = TemplateContext(batch=batch, settings=self.settings, receiver=receiver)
        errors: list[RenderError] = []

        fields: list[str] = []
        for name in (title_template, message_template):
            rendered = self.templates.render(name, context)
            if rendered.error is not None:
                logger.warning(f"Rendering {name!r} for {receiver!r} degraded: {rendered.error}")
                errors.append(rendered.error)
            fields.append(rendered.text.strip())

        title, message = fields
        return BatchSummary(
            status=batch.status(),
            title=title,
            message=message,
            context=context,
            errors=tuple(errors),
        )
