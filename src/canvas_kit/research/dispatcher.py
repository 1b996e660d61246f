# src/canvas_kit/research/dispatcher.py

import logging
from collections.abc import Sequence
from time import monotonic

from canvas_kit.observability import names
from canvas_kit.observability.base import MetricsHook, NoOpMetricsHook

from .citations import map_citations
from .config import ParserConfig
from .parsers import (
    BusinessModelCanvasParser,
    CompetitiveAnalysisParser,
    FrameworkParser,
    LeanCanvasParser,
    MarketSizingParser,
    SwotAnalysisParser,
    UserPersonaParser,
    ValuePropositionCanvasParser,
)
from .schemas import EmptyData
from .types import ParsedResult, RawCitation

logger = logging.getLogger(__name__)

PARSERS: dict[str, type[FrameworkParser]] = {
    parser.framework: parser
    for parser in (
        MarketSizingParser,
        CompetitiveAnalysisParser,
        UserPersonaParser,
        SwotAnalysisParser,
        BusinessModelCanvasParser,
        LeanCanvasParser,
        ValuePropositionCanvasParser,
    )
}

UNKNOWN_FRAMEWORK = "unknown-framework"


def get_parser(framework: str, config: ParserConfig | None = None) -> FrameworkParser:
    try:
        parser_cls = PARSERS[framework]
    except KeyError:
        logger.error("Parser not found: %s", framework)
        raise KeyError(f"Parser for framework '{framework}' not found")
    return parser_cls(config)


def parse_research_result(
    framework: str,
    content: str,
    raw_citations: Sequence[RawCitation] = (),
    *,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedResult:
    """Route research text to the parser for `framework`.

    An unrecognized framework yields a zero-confidence result with
    `missing_fields == ["unknown-framework"]` instead of raising.
    """
    start = monotonic()

    if framework not in PARSERS:
        logger.warning("Unknown framework type: %s", framework)
        result = ParsedResult(
            framework=framework,
            data=EmptyData(),
            citations=map_citations(raw_citations),
            confidence=0,
            missing_fields=[UNKNOWN_FRAMEWORK],
            warnings=[f"Unknown framework type: {framework}"],
            raw_content=content,
        )
    else:
        result = get_parser(framework, config).parse(content, raw_citations)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(
        names.RESEARCH_PARSE_DURATION, elapsed_ms, labels={"framework": framework}
    )
    metrics_hook.increment(names.RESEARCH_PARSES_TOTAL, labels={"framework": framework})
    metrics_hook.record_gauge(
        names.RESEARCH_CONFIDENCE, result.confidence, labels={"framework": framework}
    )
    return result
