# src/canvas_kit/research/parsers/base.py

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from ..config import ParserConfig
from ..lists import extract_list_items
from ..schemas import FrameworkData
from ..scoring import ConfidenceScorer
from ..types import Citation, ParsedResult, RawCitation

logger = logging.getLogger(__name__)


class FrameworkParser(ABC):
    """Turns one research response into a framework-specific result.

    Parsers are stateless and never raise on content: sparse or malformed
    input lowers the confidence and fills `missing_fields` and `warnings`.
    """

    framework: ClassVar[str]

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def parse(
        self, content: str, raw_citations: Sequence[RawCitation] = ()
    ) -> ParsedResult:
        scorer = ConfidenceScorer()

        text = content
        if len(content) > self.config.max_content_chars:
            logger.warning(
                "Research content for %s truncated from %d to %d chars",
                self.framework,
                len(content),
                self.config.max_content_chars,
            )
            text = content[: self.config.max_content_chars]
            scorer.warn(
                f"Content truncated to the first {self.config.max_content_chars} "
                "characters before parsing"
            )

        data, citations = self._extract(text, raw_citations, scorer)

        logger.debug(
            "Parsed %s: confidence=%d, missing=%s, citations=%d",
            self.framework,
            scorer.confidence,
            scorer.missing_fields,
            len(citations),
        )
        return ParsedResult(
            framework=self.framework,
            data=data,
            citations=citations,
            confidence=scorer.confidence,
            missing_fields=scorer.missing_fields,
            warnings=scorer.warnings,
            raw_content=content,
        )

    @abstractmethod
    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[FrameworkData, list[Citation]]:
        """Build the payload and citations, recording penalties on `scorer`."""
        raise NotImplementedError

    def _items(self, text: str, header_alternatives: str) -> list[str]:
        return extract_list_items(
            text, header_alternatives, max_item_chars=self.config.max_list_item_chars
        )
