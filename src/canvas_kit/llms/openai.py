# src/canvas_kit/llms/openai.py

import logging
import os
from time import monotonic
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from canvas_kit.observability import names
from canvas_kit.observability.base import MetricsHook, NoOpMetricsHook
from canvas_kit.research.types import RawCitation

from .base import DeepResearchResult, ResearchClient, ResearchClientError, ResearchUsage
from .config import DEFAULT_RESEARCH_MODEL

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search_preview"}


class OpenAIResearchClient(ResearchClient):
    """Deep-research client over the OpenAI Responses API.

    Stateless. No retries. No parsing of the returned text.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_RESEARCH_MODEL,
        timeout: float = 600.0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client: AsyncOpenAI | None = None
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAIResearchClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> AsyncOpenAI:
        """Create the SDK client on first use, once a key is available."""
        if self._client is None:
            api_key = self._api_key or os.environ.get("OPENAI_API_KEY")
            if not api_key:
                raise ResearchClientError(
                    "OpenAI API key not configured. Set OPENAI_API_KEY or pass "
                    "api_key in ResearchConfig.",
                    "API_KEY_MISSING",
                )
            self._client = AsyncOpenAI(api_key=api_key, timeout=self._timeout)
        return self._client

    async def research(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        model: str | None = None,
    ) -> DeepResearchResult:
        client = self._get_client()
        model = model or self._model
        start = monotonic()

        logger.debug(
            "Calling OpenAI deep research: model=%s, prompt_chars=%d",
            model,
            len(user_prompt),
        )

        try:
            raw = await client.responses.create(
                model=model,
                input=[
                    {
                        "role": "developer",
                        "content": [{"type": "input_text", "text": system_prompt}],
                    },
                    {
                        "role": "user",
                        "content": [{"type": "input_text", "text": user_prompt}],
                    },
                ],  # type: ignore[arg-type]
                tools=[WEB_SEARCH_TOOL],  # type: ignore[list-item]
            )
        except OpenAIError as exc:
            self.metrics_hook.increment(
                names.RESEARCH_ERRORS_TOTAL, labels={"model": model}
            )
            logger.error("OpenAI deep research failed: %s", exc)
            raise ResearchClientError(str(exc), "API_ERROR") from exc

        elapsed_ms = 1000 * (monotonic() - start)

        # Normalize immediately - provider objects never escape
        result = self._normalize_response(raw, model, elapsed_ms)

        self.metrics_hook.record_latency(names.RESEARCH_CALL_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.RESEARCH_REQUESTS_TOTAL,
            labels={"provider": "openai", "model": model},
        )
        self.metrics_hook.increment(
            names.RESEARCH_TOKENS_TOTAL, result.usage.total_tokens
        )

        logger.info(
            "OpenAI deep research: chars=%d, citations=%d, tokens=%d, latency=%.0fms",
            len(result.content),
            len(result.citations),
            result.usage.total_tokens,
            elapsed_ms,
        )
        return result

    def _normalize_response(
        self, raw: Any, model: str, latency_ms: float
    ) -> DeepResearchResult:
        """Concatenate output text and collect URL citations.

        This is the boundary. Raw provider objects stop here.
        """
        content = ""
        citations: list[RawCitation] = []

        for item in getattr(raw, "output", None) or []:
            if item.type != "message" or not item.content:
                continue
            for part in item.content:
                if part.type != "output_text":
                    continue
                content += part.text
                for annotation in getattr(part, "annotations", None) or []:
                    if annotation.type != "url_citation":
                        continue
                    citations.append(
                        RawCitation(
                            title=annotation.title or "Untitled",
                            url=annotation.url,
                            start_index=annotation.start_index,
                            end_index=annotation.end_index,
                        )
                    )

        usage = getattr(raw, "usage", None)
        input_tokens = (usage.input_tokens or 0) if usage else 0
        output_tokens = (usage.output_tokens or 0) if usage else 0

        return DeepResearchResult(
            content=content,
            citations=citations,
            usage=ResearchUsage(
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                total_tokens=input_tokens + output_tokens,
            ),
            model=model,
            latency_ms=latency_ms,
        )
