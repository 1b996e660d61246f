# src/canvas_kit/research/parsers/competitive.py

import re
from collections.abc import Sequence

from ..citations import map_citations
from ..schemas import CompetitiveAnalysisData, Competitor, OurPosition
from ..scoring import ConfidenceScorer
from ..sections import locate_sections, split_level2_blocks
from ..types import Citation, RawCitation
from .base import FrameworkParser

NON_COMPETITOR_HEADER = re.compile(
    r"\b(?:TAM|SAM|SOM|Market|Our Position|Potential Position|Summary|Overview)\b",
    re.IGNORECASE,
)
_COMPETITOR_PREFIX = re.compile(r"^Competitor\s*\d*\s*[:.\-]?\s*", re.IGNORECASE)

OUR_POSITION_HEADERS = "Our Potential Position|Our Position|Differentiators"
MIN_BLOCK_CHARS = 20
MIN_COMPETITORS = 3


class CompetitiveAnalysisParser(FrameworkParser):
    """One competitor per `## ` block that lists strengths or weaknesses."""

    framework = "competitive-analysis"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[CompetitiveAnalysisData, list[Citation]]:
        cap = self.config.max_items_per_list
        competitors: list[Competitor] = []
        headers: list[str] = []

        for block in split_level2_blocks(text):
            if len(block) < MIN_BLOCK_CHARS:
                continue
            header = block.split("\n", 1)[0].strip()
            if not header or NON_COMPETITOR_HEADER.search(header):
                continue

            strengths = self._items(block, "Strengths")
            weaknesses = self._items(block, "Weaknesses")
            if not strengths and not weaknesses:
                continue

            name = _COMPETITOR_PREFIX.sub("", header).strip(" #*") or "Unknown Competitor"
            competitors.append(
                Competitor(
                    name=name,
                    strengths=strengths[:cap],
                    weaknesses=weaknesses[:cap],
                )
            )
            headers.append(header)

        # Scoped to the whole document, not to a competitor block
        differentiators = self._items(text, "Differentiators|Our Position")
        gaps = self._items(text, "Gaps")
        opportunities = self._items(text, "Opportunities")

        field_headers = {
            f"competitors[{index}]": re.escape(header)
            for index, header in enumerate(headers)
        }
        field_headers["ourPosition"] = OUR_POSITION_HEADERS
        citations = map_citations(raw_citations, locate_sections(text, field_headers))

        scorer.require("competitors", bool(competitors), 40)
        if len(competitors) < MIN_COMPETITORS:
            scorer.penalize(
                20,
                f"Only {len(competitors)} competitors found; "
                f"at least {MIN_COMPETITORS} expected",
            )
        scorer.require_citations(citations, 20)
        for competitor in competitors:
            if not competitor.strengths:
                scorer.warn(f"Competitor '{competitor.name}' has no strengths listed")
            if not competitor.weaknesses:
                scorer.warn(f"Competitor '{competitor.name}' has no weaknesses listed")

        our_position = None
        if differentiators or gaps or opportunities:
            our_position = OurPosition(
                differentiators=differentiators,
                gaps=gaps,
                opportunities=opportunities,
            )

        return (
            CompetitiveAnalysisData(competitors=competitors, our_position=our_position),
            citations,
        )
