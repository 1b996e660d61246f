# src/canvas_kit/research/__init__.py

"""Research-response parsing.

Turns the free text returned by a deep-research call into typed framework
data, with citation-to-field attribution and a 0-100 confidence score.

Pipeline:
- sections: locate markdown headers and compute field spans
- numeric / lists: pull values and bullet items out of a section
- citations: deduplicate by URL and attribute to field spans
- scoring: subtractive confidence model
- parsers: one per framework, composing the stages above

Example:
    >>> from canvas_kit.research import parse_research_result
    >>>
    >>> result = parse_research_result("swot-analysis", "## Strengths\\n- Team", [])
    >>> result.data.strengths[0].item
    'Team'
"""

from .config import ParserConfig
from .dispatcher import PARSERS, get_parser, parse_research_result
from .parsers import FrameworkParser
from .schemas import FrameworkData
from .types import (
    FRAMEWORK_TYPES,
    Citation,
    FrameworkType,
    ParsedResult,
    RawCitation,
    SectionSpan,
)

__all__ = [
    # Dispatcher
    "parse_research_result",
    "get_parser",
    "PARSERS",
    # Parsers
    "FrameworkParser",
    # Config
    "ParserConfig",
    # Types
    "Citation",
    "FrameworkData",
    "FrameworkType",
    "FRAMEWORK_TYPES",
    "ParsedResult",
    "RawCitation",
    "SectionSpan",
]
