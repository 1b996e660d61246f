# src/canvas_kit/llms/__init__.py

"""Deep-research client layer for canvas-kit.

Sends a system prompt and a framework-specific research prompt to a
web-searching model and returns the raw text with URL citations.

Design principles:
- Stateless: Every call receives both prompts
- Transport only: Parsing belongs to canvas_kit.research
- No leakage: Provider objects never escape the adapter

Example:
    >>> from canvas_kit.llms import create_research_client, ResearchConfig
    >>>
    >>> client = create_research_client(ResearchConfig(api_key="sk-..."))
    >>> result = await client.research(system_prompt="...", user_prompt="...")
    >>> print(result.content, len(result.citations))
"""

from .base import (
    DeepResearchResult,
    ResearchClient,
    ResearchClientError,
    ResearchUsage,
)
from .config import DEFAULT_RESEARCH_MODEL, DeepResearchModel, ResearchConfig
from .factory import create_research_client

__all__ = [
    # Factory
    "create_research_client",
    # Protocol
    "ResearchClient",
    # Config
    "ResearchConfig",
    "DeepResearchModel",
    "DEFAULT_RESEARCH_MODEL",
    # Types
    "DeepResearchResult",
    "ResearchUsage",
    # Errors
    "ResearchClientError",
]
