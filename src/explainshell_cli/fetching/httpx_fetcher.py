# src/explainshell_cli/fetching/httpx_fetcher.py

import logging
from time import monotonic
from urllib.parse import quote

import httpx

from explainshell_cli.config import ExplainConfig
from explainshell_cli.observability import names
from explainshell_cli.observability.base import MetricsHook, NoOpMetricsHook

from .base import FetchError, Fetcher

logger = logging.getLogger(__name__)


class HttpxFetcher(Fetcher):
    """Fetches explanation pages with a single async HTTP GET.

    Stateless. One attempt per call. No retries.
    """

    def __init__(
        self,
        config: ExplainConfig = ExplainConfig(),
        transport: httpx.AsyncBaseTransport | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._config = config
        self._transport = transport
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized HttpxFetcher with base_url=%s, timeout=%s",
            config.base_url,
            config.timeout,
        )

    def build_url(self, command: str) -> str:
        return f"{self._config.explain_url()}?cmd={quote(command, safe='')}"

    async def fetch(self, command: str) -> str:
        url = self.build_url(command)
        start = monotonic()
        logger.debug("GET %s", url)

        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            self.metrics_hook.increment(names.FETCH_ERRORS_TOTAL)
            logger.debug("Fetch failed for %s: %s", url, exc)
            raise FetchError(url, exc) from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FETCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.FETCH_REQUESTS_TOTAL,
            labels={"status": str(response.status_code)},
        )
        logger.info(
            "Fetched explanation: status=%d, bytes=%d, latency=%.0fms",
            response.status_code,
            len(response.content),
            elapsed_ms,
        )
        return response.text

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {
            "follow_redirects": True,
            "headers": {"User-Agent": self._config.user_agent},
        }
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)
