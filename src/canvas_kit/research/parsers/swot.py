# src/canvas_kit/research/parsers/swot.py

import re
from collections.abc import Sequence

from ..citations import map_citations
from ..schemas import Level, SwotAnalysisData, SwotItem, ThreatItem
from ..scoring import ConfidenceScorer
from ..types import Citation, RawCitation
from .base import FrameworkParser


def _level_pattern(label: str) -> re.Pattern[str]:
    # "High impact", "impact: high", "Impact level - Medium"
    return re.compile(
        rf"\b(high|medium|low)[ \t\-]*{label}\b"
        rf"|\b{label}(?:[ \t]+level)?[ \t]*[:=\-]?[ \t]*(high|medium|low)\b",
        re.IGNORECASE,
    )


_IMPACT = _level_pattern("impact")
_LIKELIHOOD = _level_pattern("likelihood")


def _level(pattern: re.Pattern[str], item: str) -> Level | None:
    match = pattern.search(item)
    if match is None:
        return None
    return (match.group(1) or match.group(2)).lower()  # type: ignore[return-value]


class SwotAnalysisParser(FrameworkParser):
    framework = "swot-analysis"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[SwotAnalysisData, list[Citation]]:
        citations = map_citations(raw_citations)

        strengths = [
            SwotItem(item=item, impact=_level(_IMPACT, item))
            for item in self._items(text, "Strengths")
        ]
        weaknesses = [
            SwotItem(item=item, impact=_level(_IMPACT, item))
            for item in self._items(text, "Weaknesses")
        ]
        opportunities = [
            SwotItem(item=item, impact=_level(_IMPACT, item))
            for item in self._items(text, "Opportunities")
        ]
        threats = [
            ThreatItem(item=item, likelihood=_level(_LIKELIHOOD, item))
            for item in self._items(text, "Threats")
        ]

        scorer.require("strengths", bool(strengths), 20)
        scorer.require("weaknesses", bool(weaknesses), 20)
        scorer.require("opportunities", bool(opportunities), 20)
        scorer.require("threats", bool(threats), 20)
        scorer.require_citations(citations, 10)

        data = SwotAnalysisData(
            strengths=strengths,
            weaknesses=weaknesses,
            opportunities=opportunities,
            threats=threats,
        )
        return data, citations
