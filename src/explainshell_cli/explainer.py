# src/explainshell_cli/explainer.py

import logging

from explainshell_cli.config import ExplainConfig
from explainshell_cli.fetching.base import Fetcher
from explainshell_cli.fetching.httpx_fetcher import HttpxFetcher
from explainshell_cli.formatting.formatter import format_explanation
from explainshell_cli.observability.base import MetricsHook, NoOpMetricsHook
from explainshell_cli.parsers.base import ExplanationParser
from explainshell_cli.parsers.html_parser import ExplainshellHtmlParser

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when there is no command text to explain."""


class Explainer:
    """Fetches, extracts and formats one explanation per call.

    Holds collaborators only. No state survives between calls.
    """

    def __init__(
        self,
        config: ExplainConfig = ExplainConfig(),
        fetcher: Fetcher | None = None,
        parser: ExplanationParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        self.fetcher = fetcher or HttpxFetcher(config=config, metrics_hook=metrics_hook)
        self.parser = parser or ExplainshellHtmlParser(
            origin=config.origin, metrics_hook=metrics_hook
        )

    async def explain(self, command: str) -> str:
        """Return the formatted report for a command line.

        Raises:
            EmptyInputError: If the command is blank.
            FetchError: If the explanation page cannot be fetched.
        """
        if not command.strip():
            raise EmptyInputError("No command to explain")

        logger.info("Explaining command: %s", command)
        markup = await self.fetcher.fetch(command)
        return self.explain_markup(markup)

    def explain_markup(self, markup: str) -> str:
        parsed = self.parser.parse(markup)
        return format_explanation(parsed, metrics_hook=self.metrics_hook)


def explain_markup(markup: str, config: ExplainConfig = ExplainConfig()) -> str:
    """Format an already fetched explanation page."""
    return Explainer(config=config).explain_markup(markup)


async def get_explanation(command: str, config: ExplainConfig = ExplainConfig()) -> str:
    """Fetch and format the explanation for a command line."""
    return await Explainer(config=config).explain(command)
