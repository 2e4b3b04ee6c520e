"""Notifier registry: maps a channel's kind tag to the factory that builds its notifier."""

from __future__ import annotations

import logging

from ..config import ChannelConfig, DispatchSettings
from ..ports.notifier import INotifier, NotifierFactory
from ..primitives.exceptions import ConfigurationError
from .slack import SlackNotifier
from .victorops import VictorOpsNotifier
from .webhook import WebhookNotifier

logger = logging.getLogger(__name__)


class NotifierRegistry:
    """
    Registry of notifier factories keyed by provider kind.

    Usage::

        registry = default_registry()
        registry.register("custom", CustomNotifier)
        notifier = registry.create(config, settings)
    """

    def __init__(self, factories: dict[str, NotifierFactory] | None = None) -> None:
        self._factories: dict[str, NotifierFactory] = {}
        for kind, factory in (factories or {}).items():
            self.register(kind, factory)

    def register(self, kind: str, factory: NotifierFactory) -> None:
        """Register (or replace) the factory for a kind."""
        kind = kind.strip().lower()
        if kind in self._factories:
            logger.debug(f"Replacing notifier factory for kind {kind!r}")
        self._factories[kind] = factory

    def kinds(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, str) and kind.strip().lower() in self._factories

    def create(self, config: ChannelConfig, settings: DispatchSettings) -> INotifier:
        """
        Build the notifier for a channel.

        Raises ``ConfigurationError`` for unknown kinds and for settings the
        variant rejects.
        """
        factory = self._factories.get(config.kind)
        if factory is None:
            raise ConfigurationError(
                f"unsupported notifier kind {config.kind!r}", channel=config.label
            )
        return factory(config, settings)


def default_registry() -> NotifierRegistry:
    """Registry holding every built-in notifier variant."""
    return NotifierRegistry(
        {
            VictorOpsNotifier.kind: VictorOpsNotifier,
            WebhookNotifier.kind: WebhookNotifier,
            SlackNotifier.kind: SlackNotifier,
        }
    )
