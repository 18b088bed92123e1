# src/explainshell_cli/observability/base.py

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MetricsHook(Protocol):
    """Sink for pipeline timings and counts.

    Every stage (fetch, parse, format) reports through one of these.
    Durations are milliseconds.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric as a debug log record.

    Used by the CLI at the highest verbosity; there is no metrics backend.
    """

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "metric %s=%.1fms%s", name, value_ms, _fmt(labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "metric %s+=%d%s", name, value, _fmt(labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "metric %s=%s%s", name, value, _fmt(labels))


def _fmt(labels: dict[str, str] | None) -> str:
    if not labels:
        return ""
    return " " + ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
