__version__ = "0.1.0"

# Config
from .config import ExplainConfig

# Explainer
from .explainer import EmptyInputError, Explainer, explain_markup, get_explanation

# Fetching
from .fetching import FetchError, Fetcher, HttpxFetcher

# Formatting
from .formatting import HelpGroup, build_help_groups, format_explanation

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CommandSegment,
    ExplainshellHtmlParser,
    ExplanationParser,
    Expansion,
    ParsedExplanation,
    clean_text,
    resolve_href,
)

__all__ = [
    "__version__",
    # Config
    "ExplainConfig",
    # Explainer
    "EmptyInputError",
    "Explainer",
    "explain_markup",
    "get_explanation",
    # Fetching
    "FetchError",
    "Fetcher",
    "HttpxFetcher",
    # Formatting
    "HelpGroup",
    "build_help_groups",
    "format_explanation",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CommandSegment",
    "ExplainshellHtmlParser",
    "ExplanationParser",
    "Expansion",
    "ParsedExplanation",
    "clean_text",
    "resolve_href",
]
