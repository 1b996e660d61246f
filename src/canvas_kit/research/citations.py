# src/canvas_kit/research/citations.py

import logging
from collections.abc import Iterable, Mapping

from .types import Citation, RawCitation, SectionSpan, utc_now_iso

logger = logging.getLogger(__name__)


def map_citations(
    raw_citations: Iterable[RawCitation],
    spans: Mapping[str, SectionSpan] | None = None,
) -> list[Citation]:
    """Deduplicate citations by URL and attribute them to fields.

    The first citation seen for a URL wins; later duplicates are dropped
    along with their titles. When `spans` is given, a citation with a
    `start_index` is attributed to every field whose span contains that
    offset, in the mapping's key order. Without spans, `relevant_fields`
    stays empty.
    """
    accessed_at = utc_now_iso()
    seen: set[str] = set()
    citations: list[Citation] = []
    dropped = 0

    for raw in raw_citations:
        if raw.url in seen:
            dropped += 1
            continue
        seen.add(raw.url)

        relevant_fields: list[str] = []
        if spans and raw.start_index is not None:
            relevant_fields = [
                name for name, span in spans.items() if span.contains(raw.start_index)
            ]

        citations.append(
            Citation(
                title=raw.title,
                url=raw.url,
                accessed_at=accessed_at,
                relevant_fields=relevant_fields,
            )
        )

    if dropped:
        logger.debug("Dropped %d duplicate citations", dropped)
    return citations
