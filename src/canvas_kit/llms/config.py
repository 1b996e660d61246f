# src/canvas_kit/llms/config.py

from dataclasses import dataclass
from typing import Literal

DeepResearchModel = Literal[
    "o3-deep-research-2025-06-26",
    "o4-mini-deep-research-2025-06-26",
]

DEFAULT_RESEARCH_MODEL: DeepResearchModel = "o4-mini-deep-research-2025-06-26"


@dataclass(frozen=True)
class ResearchConfig:
    """Configuration for research clients.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai"] = "openai"
    model: DeepResearchModel = DEFAULT_RESEARCH_MODEL
    api_key: str | None = None  # Falls back to OPENAI_API_KEY
    timeout: float = 600.0  # Deep research runs for minutes
