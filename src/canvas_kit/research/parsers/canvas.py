# src/canvas_kit/research/parsers/canvas.py

from collections.abc import Sequence

from ..citations import map_citations
from ..schemas import (
    BusinessModelCanvasData,
    Channel,
    Cost,
    CustomerRelationship,
    CustomerSegment,
    KeyActivity,
    KeyPartner,
    KeyResource,
    RevenueStream,
    ValueProposition,
)
from ..scoring import ConfidenceScorer
from ..types import Citation, RawCitation
from .base import FrameworkParser

BLOCK_PENALTY = 10


class BusinessModelCanvasParser(FrameworkParser):
    """Nine canvas blocks; only four of them count towards confidence."""

    framework = "business-model-canvas"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[BusinessModelCanvasData, list[Citation]]:
        citations = map_citations(raw_citations)

        data = BusinessModelCanvasData(
            customer_segments=[
                CustomerSegment(segment=s)
                for s in self._items(text, "Customer Segments?")
            ],
            value_propositions=[
                ValueProposition(proposition=p)
                for p in self._items(text, "Value Propositions?")
            ],
            channels=[Channel(channel=c) for c in self._items(text, "Channels")],
            customer_relationships=[
                CustomerRelationship(relationship=r)
                for r in self._items(text, "Customer Relationships?")
            ],
            revenue_streams=[
                RevenueStream(stream=s) for s in self._items(text, "Revenue Streams?")
            ],
            key_resources=[
                KeyResource(resource=r) for r in self._items(text, "Key Resources")
            ],
            key_activities=[
                KeyActivity(activity=a) for a in self._items(text, "Key Activities")
            ],
            key_partnerships=[
                KeyPartner(partner=p)
                for p in self._items(text, "Key Partner(?:ship)?s?")
            ],
            cost_structure=[Cost(cost=c) for c in self._items(text, "Cost Structure")],
        )

        scorer.require("customerSegments", bool(data.customer_segments), BLOCK_PENALTY)
        scorer.require("valuePropositions", bool(data.value_propositions), BLOCK_PENALTY)
        scorer.require("channels", bool(data.channels), BLOCK_PENALTY)
        scorer.require("revenueStreams", bool(data.revenue_streams), BLOCK_PENALTY)
        scorer.require_citations(citations, 10)

        return data, citations
