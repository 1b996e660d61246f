# src/canvas_kit/llms/base.py

from dataclasses import dataclass
from typing import Literal, Protocol

from canvas_kit.observability.base import MetricsHook
from canvas_kit.research.types import RawCitation

ErrorCode = Literal["API_KEY_MISSING", "API_ERROR"]

# Rough blended price per 1k tokens for deep-research models
COST_PER_1K_TOKENS_USD = 0.015


class ResearchClientError(Exception):
    """Raised when a research call cannot be made or fails upstream."""

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class ResearchUsage:
    """Token usage for one research call."""

    input_tokens: int
    output_tokens: int
    total_tokens: int

    @property
    def estimated_cost_usd(self) -> float:
        return round(self.total_tokens / 1000 * COST_PER_1K_TOKENS_USD, 2)


@dataclass(frozen=True)
class DeepResearchResult:
    """Normalized research response.

    Provider details never leak outside the adapter.
    """

    content: str
    citations: list[RawCitation]
    usage: ResearchUsage
    model: str
    latency_ms: float


class ResearchClient(Protocol):
    """Protocol for deep-research clients.

    Design principles:
    - Stateless: every call receives both prompts
    - Transport only: no parsing of the returned text
    - No leakage: provider objects never escape the adapter
    """

    metrics_hook: MetricsHook

    @property
    def model(self) -> str: ...

    async def research(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        model: str | None = None,
    ) -> DeepResearchResult:
        """Run one research call.

        Args:
            system_prompt: Instructions sent with the developer role.
            user_prompt: The framework-specific research request.
            model: Overrides the client's configured model for this call.

        Returns:
            Normalized DeepResearchResult with text, citations and usage.

        Raises:
            ResearchClientError: If no API key is configured or the provider
                call fails.
        """
        ...
