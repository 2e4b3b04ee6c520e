"""Dispatch coordinator: runs every configured channel's notification pipeline for one batch."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone

from .alerts import Alert, AlertBatch, AlertStatus
from .config import ChannelConfig, DispatchSettings
from .correlation import correlation_scope
from .delivery import FailureReason, NotificationResult, Payload
from .notifiers.registry import NotifierRegistry, default_registry
from .ports.notifier import INotifier
from .ports.sink import IResultSink
from .ports.sender import ITransport, TransportResponse
from .primitives.exceptions import (
    ConfigurationError,
    InvalidInputError,
    SerializationError,
    TransportError,
)
from .sanitization import MetadataSanitizer, default_sanitizer, redact_url
from .summary import Summarizer
from .template.defaults import DEFAULT_MESSAGE_TEMPLATE, DEFAULT_TITLE_TEMPLATE
from .template.registry import TemplateSet

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _Cancelled(Exception):
    """The dispatch's cancel signal fired while a delivery was in flight."""


class DispatchCoordinator:
    """
    Decides, builds and delivers at most one notification per channel per batch.

    Per channel the pipeline is ``setup -> summarize -> (suppress | build ->
    deliver)``. Channels run concurrently and in isolation: whatever goes wrong
    in one channel becomes that channel's ``FAILED`` result and nothing else.
    ``dispatch`` always returns exactly one result per input channel, in input
    order.

    Usage::

        templates = await TemplateSet.load(provider)
        coordinator = DispatchCoordinator(templates, HttpTransport(), settings=settings)
        results = await coordinator.dispatch(batch, channel_configs)
    """

    def __init__(
        self,
        templates: TemplateSet,
        transport: ITransport,
        *,
        registry: NotifierRegistry | None = None,
        settings: DispatchSettings | None = None,
        sink: IResultSink | None = None,
        clock: Callable[[], datetime] | None = None,
        sanitizer: MetadataSanitizer | None = None,
    ) -> None:
        self.settings = settings or DispatchSettings()
        self.transport = transport
        self.registry = registry or default_registry()
        self.sink = sink
        self.summarizer = Summarizer(templates, self.settings)
        self._clock = clock or _utc_now
        self._sanitizer = sanitizer or default_sanitizer

    def setup_channel(self, config: ChannelConfig) -> INotifier:
        """
        Build and validate the notifier for one channel.

        Raises ``ConfigurationError`` when the channel cannot be used, so
        configuration management can reject it before it is ever dispatched to.
        """
        notifier = self.registry.create(config, self.settings)
        logger.debug(
            f"Channel {config.label} ready as {config.kind} "
            f"with settings {self._sanitizer.sanitize(config.settings)}"
        )
        return notifier

    async def dispatch(
        self,
        batch: AlertBatch | Sequence[Alert],
        channels: Iterable[ChannelConfig],
        *,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[NotificationResult]:
        """
        Notify every channel about one batch.

        ``cancel`` is a cooperative cancel signal and ``timeout`` an overall
        deadline (seconds) that fires the same signal. Channels that have not
        started delivering when it fires, and deliveries still in flight, end
        as ``FAILED`` with reason ``CANCELLED``.

        Raises ``InvalidInputError`` for an empty batch before touching any channel.
        """
        if not isinstance(batch, AlertBatch):
            alerts = tuple(batch)
            if not alerts:
                raise InvalidInputError("Cannot dispatch an empty alert batch")
            batch = AlertBatch(alerts=alerts)

        configs = list(channels)
        if cancel is None:
            cancel = asyncio.Event()

        with correlation_scope() as correlation_id:
            logger.info(
                f"Dispatching {batch.status().value} batch of {len(batch)} alert(s) "
                f"to {len(configs)} channel(s) [correlation_id={correlation_id}]"
            )
            # Setup runs for every channel before any delivery starts.
            prepared = [self._prepare(config) for config in configs]

            deadline = None
            if timeout is not None:
                deadline = asyncio.get_running_loop().call_later(timeout, cancel.set)
            semaphore = asyncio.Semaphore(self.settings.max_concurrency)
            try:
                results = await asyncio.gather(
                    *(self._run(item, batch, semaphore, cancel) for item in prepared)
                )
            finally:
                if deadline is not None:
                    deadline.cancel()

            for result in results:
                await self._record(result)

        return list(results)

    def _prepare(self, config: ChannelConfig) -> INotifier | NotificationResult:
        try:
            return self.setup_channel(config)
        except ConfigurationError as e:
            logger.error(f"Excluding channel {config.label} from dispatch: {e}")
            return NotificationResult.failed(config, FailureReason.CONFIGURATION, error=str(e))
        except Exception as e:  # noqa: BLE001
            logger.error(
                f"Notifier factory for {config.kind} raised while setting up {config.label}: {e}",
                exc_info=True,
            )
            return NotificationResult.failed(config, FailureReason.INTERNAL, error=str(e))

    async def _run(
        self,
        item: INotifier | NotificationResult,
        batch: AlertBatch,
        semaphore: asyncio.Semaphore,
        cancel: asyncio.Event,
    ) -> NotificationResult:
        if isinstance(item, NotificationResult):
            return item

        config = item.config
        async with semaphore:
            if cancel.is_set():
                logger.warning(f"Skipping channel {config.label}: dispatch cancelled")
                return NotificationResult.failed(
                    config,
                    FailureReason.CANCELLED,
                    error="dispatch cancelled before channel started",
                )
            try:
                return await self._notify(item, batch, cancel)
            except Exception as e:  # noqa: BLE001
                logger.error(
                    f"Failed to dispatch {config.kind} notification to {config.label}: {e}",
                    exc_info=True,
                )
                return NotificationResult.failed(config, FailureReason.INTERNAL, error=str(e))

    async def _notify(
        self,
        notifier: INotifier,
        batch: AlertBatch,
        cancel: asyncio.Event,
    ) -> NotificationResult:
        config = notifier.config
        if batch.status() is AlertStatus.RESOLVED and not notifier.should_notify_on_resolve():
            logger.info(f"Suppressing resolve notification for {config.label}")
            return NotificationResult.suppressed(config)

        summary = self.summarizer.summarize(
            batch,
            receiver=config.label,
            title_template=config.get_str("title_template") or DEFAULT_TITLE_TEMPLATE,
            message_template=config.get_str("message_template") or DEFAULT_MESSAGE_TEMPLATE,
        )

        try:
            payload = notifier.build_payload(summary, self._clock())
        except SerializationError as e:
            logger.error(f"Could not encode {config.kind} payload for {config.label}: {e}")
            return NotificationResult.failed(config, FailureReason.SERIALIZATION, error=str(e))

        timeout = config.timeout or self.settings.default_timeout
        url = notifier.url
        logger.debug(f"Executing {config.kind} notification to {redact_url(url)}")
        try:
            response = await self._deliver(url, payload, timeout, cancel)
        except _Cancelled:
            logger.warning(f"Abandoned {config.kind} notification to {config.label}: cancelled")
            return NotificationResult.failed(
                config, FailureReason.CANCELLED, error="dispatch cancelled during delivery"
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"{config.kind} notification to {config.label} timed out after {timeout}s"
            )
            return NotificationResult.failed(
                config, FailureReason.TIMEOUT, error=f"timed out after {timeout}s"
            )
        except TransportError as e:
            logger.error(f"Failed to send {config.kind} notification to {config.label}: {e.reason}")
            return NotificationResult.failed(config, FailureReason.TRANSPORT, error=e.reason)
        except Exception as e:  # noqa: BLE001
            logger.error(
                f"Transport raised for {config.kind} notification to {config.label}: {e}"
            )
            return NotificationResult.failed(config, FailureReason.TRANSPORT, error=str(e))

        if not response.ok:
            logger.error(
                f"Failed to send {config.kind} notification to {config.label}: {response.error}"
            )
            return NotificationResult.failed(
                config,
                FailureReason.TRANSPORT,
                error=response.error or "delivery failed",
                status_code=response.status_code,
            )

        logger.info(f"Delivered {config.kind} notification to {config.label}")
        return NotificationResult.delivered(config, status_code=response.status_code)

    async def _deliver(
        self,
        url: str,
        payload: Payload,
        timeout: float,
        cancel: asyncio.Event,
    ) -> TransportResponse:
        if cancel.is_set():
            raise _Cancelled()
        send = asyncio.ensure_future(
            asyncio.wait_for(
                self.transport.send(
                    url,
                    payload.body,
                    payload.content_type,
                    headers=payload.headers,
                    timeout=timeout,
                ),
                timeout=timeout,
            )
        )
        cancelled = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait({send, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            send.cancel()
            raise
        finally:
            cancelled.cancel()

        if send not in done:
            send.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await send
            raise _Cancelled()
        return send.result()

    async def _record(self, result: NotificationResult) -> None:
        if self.sink is None:
            return
        try:
            await self.sink.record(result)
        except Exception as e:  # noqa: BLE001
            logger.error(
                f"Failed to record result for {result.channel_name or result.channel_uid}: {e}",
                exc_info=True,
            )
