# src/canvas_kit/research/parsers/lean.py

import re
from collections.abc import Sequence

from ..citations import map_citations
from ..schemas import (
    Cost,
    CustomerSegment,
    Feature,
    KeyMetric,
    LeanCanvasData,
    Problem,
    RevenueStream,
    UniqueValueProposition,
)
from ..scoring import ConfidenceScorer
from ..sections import extract_section
from ..types import Citation, RawCitation
from .base import FrameworkParser

UVP_HEADERS = "Unique Value Proposition|UVP|Value Proposition"
UVP_PLACEHOLDER = "Value proposition not extracted"
MIN_STATEMENT_CHARS = 10

_BULLET_PREFIX = re.compile(r"^(?:[-*]|\d{1,3}[.)])[ \t]+")


def first_statement(section: str) -> str | None:
    """First line of a section longer than 10 characters, without bullet markup."""
    for line in section.splitlines():
        line = _BULLET_PREFIX.sub("", line.strip()).replace("**", "").strip()
        if len(line) > MIN_STATEMENT_CHARS:
            return line
    return None


class LeanCanvasParser(FrameworkParser):
    framework = "lean-canvas"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[LeanCanvasData, list[Citation]]:
        citations = map_citations(raw_citations)

        problems = [Problem(problem=p) for p in self._items(text, "Problems?")]
        segments = [
            CustomerSegment(segment=s) for s in self._items(text, "Customer Segments?")
        ]
        proposition = first_statement(extract_section(text, UVP_HEADERS))

        scorer.require("problem", bool(problems), 15)
        scorer.require("customerSegments", bool(segments), 15)
        scorer.require_citations(citations, 10)

        data = LeanCanvasData(
            problem=problems,
            customer_segments=segments,
            unique_value_proposition=UniqueValueProposition(
                proposition=proposition or UVP_PLACEHOLDER
            ),
            solution=[Feature(feature=f) for f in self._items(text, "Solutions?")],
            channels=self._items(text, "Channels"),
            revenue_streams=[
                RevenueStream(stream=s) for s in self._items(text, "Revenue Streams?")
            ],
            cost_structure=[Cost(cost=c) for c in self._items(text, "Cost Structure")],
            key_metrics=[
                KeyMetric(metric=m) for m in self._items(text, "Key Metrics|Metrics")
            ],
            unfair_advantage=first_statement(extract_section(text, "Unfair Advantage")),
        )
        return data, citations
