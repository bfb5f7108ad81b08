"""Leaderboard API source over HTTP."""

import logging
import os
from typing import Any

import httpx

from crossbench.consts import (
    DEFAULT_SOURCE_URL,
    HTTP_TIMEOUT_SECONDS,
    SOURCE_URL_ENV,
    USER_AGENT,
)
from crossbench.sources.base_source import BaseSource, ensure_record_list

logger = logging.getLogger(__name__)


class HttpSource(BaseSource):
    """Fetches the full model list from the leaderboard API.

    A single GET is issued; failures propagate as httpx errors.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the HTTP source.

        Args:
            url: Endpoint returning a JSON array of models.
                 None = read from env (CROSSBENCH_SOURCE_URL), then default
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        # URL resolution: explicit param > env var > default
        if url is not None:
            self.url = url
        else:
            self.url = os.getenv(SOURCE_URL_ENV, "").strip() or DEFAULT_SOURCE_URL

        self.timeout = timeout
        self._transport = transport

    @property
    def source_name(self) -> str:
        return "zeroeval"

    async def fetch(self) -> list[Any]:
        logger.info(f"Fetching leaderboard from {self.url}")

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            logger.info(f"Received {len(response.content)} bytes")
            data = response.json()

        return ensure_record_list(data, self.url)
