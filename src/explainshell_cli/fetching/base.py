# src/explainshell_cli/fetching/base.py

from typing import Protocol

from explainshell_cli.observability.base import MetricsHook


class FetchError(RuntimeError):
    """Raised when the explanation page cannot be retrieved.

    Carries the requested URL and the underlying transport error.
    """

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Error fetching explanation from {url}: {cause}")
        self.url = url
        self.cause = cause


class Fetcher(Protocol):
    """Protocol for explanation page fetchers.

    Design principles:
    - Single attempt: No retries, no caching
    - Transport only: Returns raw markup, never interprets it
    - Fails loudly: Any non-2xx or network failure is a FetchError
    """

    metrics_hook: MetricsHook

    async def fetch(self, command: str) -> str:
        """Fetch the rendered explanation page for a command line.

        Args:
            command: Full command line, sent URL-encoded as the ``cmd`` query.

        Returns:
            Response body as text.

        Raises:
            FetchError: On network failure or non-success HTTP status.
        """
        ...
