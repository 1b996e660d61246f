# Research client
from .llms import (
    DeepResearchResult,
    ResearchClient,
    ResearchClientError,
    ResearchConfig,
    create_research_client,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Prompts
from .prompts import Prompt, PromptsLibrary, ResearchContext, generate_research_prompt

# Research parsing
from .research import (
    Citation,
    ParsedResult,
    ParserConfig,
    RawCitation,
    parse_research_result,
)

# Storage
from .storage import EntityStore, JsonEntityStore

# Tools
from .tools import Tool, ToolCall, ToolEngine, ToolRegistry, register_research_tools

__all__ = [
    # Research client
    "DeepResearchResult",
    "ResearchClient",
    "ResearchClientError",
    "ResearchConfig",
    "create_research_client",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    "ResearchContext",
    "generate_research_prompt",
    # Research parsing
    "Citation",
    "ParsedResult",
    "ParserConfig",
    "RawCitation",
    "parse_research_result",
    # Storage
    "EntityStore",
    "JsonEntityStore",
    # Tools
    "Tool",
    "ToolCall",
    "ToolEngine",
    "ToolRegistry",
    "register_research_tools",
]
