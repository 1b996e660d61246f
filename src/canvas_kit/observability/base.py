# src/canvas_kit/observability/base.py

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MetricsHook(Protocol):
    """Sink for parser, research-call, tool and store metrics.

    Durations are in milliseconds. Implementations must not raise.
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
    """Writes every metric as a debug log line. Handy for local runs."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "%s=%.1fms %s", name, value_ms, labels or {})

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "%s+=%d %s", name, value, labels or {})

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "%s=%s %s", name, value, labels or {})
