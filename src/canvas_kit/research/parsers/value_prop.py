# src/canvas_kit/research/parsers/value_prop.py

from collections.abc import Sequence

from ..citations import map_citations
from ..schemas import (
    CustomerJob,
    CustomerProfile,
    Gain,
    GainCreator,
    Pain,
    PainReliever,
    ProductOrService,
    ValueMap,
    ValuePropositionCanvasData,
)
from ..scoring import ConfidenceScorer
from ..types import Citation, RawCitation
from .base import FrameworkParser

PROFILE_PENALTY = 15


class ValuePropositionCanvasParser(FrameworkParser):
    """Customer profile (jobs, pains, gains) and value map."""

    framework = "value-proposition-canvas"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[ValuePropositionCanvasData, list[Citation]]:
        citations = map_citations(raw_citations)

        profile = CustomerProfile(
            customer_jobs=[
                CustomerJob(job=j) for j in self._items(text, "Customer Jobs|Jobs")
            ],
            pains=[Pain(pain=p) for p in self._items(text, "Pains")],
            gains=[Gain(gain=g) for g in self._items(text, "Gains")],
        )
        value_map = ValueMap(
            products_and_services=[
                ProductOrService(item=i)
                for i in self._items(text, "Products.*Services|Solutions")
            ],
            pain_relievers=[
                PainReliever(reliever=r) for r in self._items(text, "Pain Relievers")
            ],
            gain_creators=[
                GainCreator(creator=c) for c in self._items(text, "Gain Creators")
            ],
        )

        scorer.require(
            "customerProfile.customerJobs", bool(profile.customer_jobs), PROFILE_PENALTY
        )
        scorer.require("customerProfile.pains", bool(profile.pains), PROFILE_PENALTY)
        scorer.require("customerProfile.gains", bool(profile.gains), PROFILE_PENALTY)
        scorer.require_citations(citations, 10)

        data = ValuePropositionCanvasData(customer_profile=profile, value_map=value_map)
        return data, citations
