# src/canvas_kit/llms/factory.py

from canvas_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import ResearchClient
from .config import ResearchConfig


def create_research_client(
    config: ResearchConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ResearchClient:
    """Create a research client from config.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> client = create_research_client(ResearchConfig())
        >>> result = await client.research(system_prompt="...", user_prompt="...")
    """
    if config.provider == "openai":
        from .openai import OpenAIResearchClient

        return OpenAIResearchClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown research provider: {config.provider}")
