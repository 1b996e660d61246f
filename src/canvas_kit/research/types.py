# src/canvas_kit/research/types.py

import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .schemas import FrameworkData

FrameworkType = Literal[
    "market-sizing",
    "competitive-analysis",
    "user-persona",
    "swot-analysis",
    "business-model-canvas",
    "lean-canvas",
    "value-proposition-canvas",
]

FRAMEWORK_TYPES: tuple[str, ...] = (
    "market-sizing",
    "competitive-analysis",
    "user-persona",
    "swot-analysis",
    "business-model-canvas",
    "lean-canvas",
    "value-proposition-canvas",
)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_citation_id() -> str:
    """Time-based id with a random suffix. No global counter."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=5))
    return f"cit-{int(time.time() * 1000)}-{suffix}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class RawCitation:
    """Citation as returned by the research call.

    `start_index` is the character offset into the source text where the
    cited claim begins. Either offset may be missing.
    """

    title: str
    url: str
    start_index: int | None = None
    end_index: int | None = None


class Citation(BaseModel):
    """Deduplicated citation attached to a parse result."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    id: str = Field(default_factory=generate_citation_id)
    title: str
    url: str
    accessed_at: str = Field(default_factory=utc_now_iso)
    relevant_fields: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class SectionSpan:
    """Half-open character range `[start, end)` attributed to one field."""

    field_name: str
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True)
class ParsedResult:
    """Structured output of one parse call.

    Immutable. Created fresh per call, never persisted directly.
    """

    framework: str
    data: FrameworkData
    citations: list[Citation]
    confidence: int
    missing_fields: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    raw_content: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Wire shape with camelCase keys, as embedded in stored entities."""
        return {
            "framework": self.framework,
            "data": self.data.model_dump(by_alias=True, exclude_none=True),
            "citations": [c.model_dump(by_alias=True) for c in self.citations],
            "confidence": self.confidence,
            "missingFields": list(self.missing_fields),
            "warnings": list(self.warnings),
            "rawContent": self.raw_content,
        }
