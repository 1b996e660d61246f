# src/canvas_kit/research/parsers/market_sizing.py

from collections.abc import Sequence

from ..citations import map_citations
from ..numeric import extract_number, extract_percentage
from ..schemas import GrowthRate, MarketSizingData, MarketValue
from ..scoring import ConfidenceScorer
from ..sections import extract_section, locate_sections
from ..types import Citation, RawCitation
from .base import FrameworkParser

TAM_HEADERS = "TAM|Total Addressable Market"
SAM_HEADERS = "SAM|Serviceable Addressable Market|Serviceable Available Market"
SOM_HEADERS = "SOM|Serviceable Obtainable Market"
GROWTH_HEADERS = "Growth|CAGR|Market Growth"
SOURCES_HEADERS = "Sources|References|Data Sources"

FIELD_HEADERS = {
    "tam.value": TAM_HEADERS,
    "sam.value": SAM_HEADERS,
    "som.value": SOM_HEADERS,
    "growthRate": GROWTH_HEADERS,
}

MIN_MARKET_VALUE = 1_000_000
MAX_MARKET_VALUE = 100_000_000_000_000
MIN_GROWTH_RATE = -50
MAX_GROWTH_RATE = 500


class MarketSizingParser(FrameworkParser):
    """TAM / SAM / SOM values, growth rate and sources."""

    framework = "market-sizing"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[MarketSizingData, list[Citation]]:
        citations = map_citations(raw_citations, locate_sections(text, FIELD_HEADERS))

        tam_section = extract_section(text, TAM_HEADERS)
        tam = extract_number(tam_section or text)
        sam = extract_number(extract_section(text, SAM_HEADERS))
        som = extract_number(extract_section(text, SOM_HEADERS))
        growth = extract_percentage(extract_section(text, GROWTH_HEADERS) or text)
        sources = self._items(text, SOURCES_HEADERS)

        scorer.require("tam.value", bool(tam), 30)
        scorer.require("sam.value", bool(sam), 20)
        scorer.require("som.value", bool(som), 20)
        scorer.require("growthRate", bool(growth), 10)
        scorer.require_citations(citations, 20)

        if tam and sam and tam < sam:
            scorer.penalize(
                15, f"TAM ({tam:,.0f}) is smaller than SAM ({sam:,.0f})"
            )
        if sam and som and sam < som:
            scorer.penalize(
                15, f"SAM ({sam:,.0f}) is smaller than SOM ({som:,.0f})"
            )
        for label, value in (("TAM", tam), ("SAM", sam), ("SOM", som)):
            if value and not MIN_MARKET_VALUE <= value <= MAX_MARKET_VALUE:
                scorer.penalize(
                    10, f"{label} ({value:,.0f}) is outside the plausible $1M-$100T range"
                )
        if growth and not MIN_GROWTH_RATE <= growth <= MAX_GROWTH_RATE:
            scorer.penalize(
                5, f"Growth rate {growth}% is outside the plausible -50%..500% range"
            )

        data = MarketSizingData(
            tam=MarketValue(
                value=tam,
                methodology="Extracted from research" if tam_section else None,
                sources=sources or None,
            ),
            sam=MarketValue(value=sam),
            som=MarketValue(value=som),
            growth_rate=GrowthRate(rate=growth) if growth else None,
        )
        return data, citations
