"""Console transport for development debugging."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..ports.sender import ITransport, TransportResponse

logger = logging.getLogger(__name__)


class ConsoleTransport(ITransport):
    """
    Development adapter that prints payloads instead of sending them.
    """

    def __init__(self, output_to_stdout: bool = True):
        self.output_to_stdout = output_to_stdout

    async def send(
        self,
        url: str,
        body: bytes,
        content_type: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        output = [
            "═" * 50,
            f"NOTIFICATION POSTED TO {url}",
            f"Type:    {content_type}",
        ]
        if headers:
            output.append(f"Headers: {', '.join(sorted(headers))}")
        output.append(f"Body:    {body.decode('utf-8', errors='replace')}")
        output.append("═" * 50)

        full_output = "\n".join(output)
        logger.info(full_output)

        if self.output_to_stdout:
            print(full_output)

        return TransportResponse.success()
