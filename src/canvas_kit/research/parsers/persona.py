# src/canvas_kit/research/parsers/persona.py

import re
from collections.abc import Sequence

from ..citations import map_citations
from ..schemas import Behavior, Demographics, Persona, UserPersonaData
from ..scoring import ConfidenceScorer
from ..types import Citation, RawCitation
from .base import FrameworkParser

_PERSONA_HEADER = re.compile(r"^[ \t]*#+[ \t]*Persona[ \t]*\d+", re.IGNORECASE | re.MULTILINE)
_NAME_LINE = re.compile(r"^[ \t>*\-]*Name\b[ \t*]*:[ \t*]*([^\n]+)", re.IGNORECASE | re.MULTILINE)
_NAME_NOISE = re.compile(r"[\"':*]")

MIN_CHUNK_CHARS = 50
MIN_PERSONAS = 2
DEFAULT_NAME = "Unnamed Persona"


def _field(labels: str) -> re.Pattern[str]:
    return re.compile(
        rf"^[ \t>*\-]*(?:{labels})\b[ \t*]*:?[ \t*]*([^\n]+)",
        re.IGNORECASE | re.MULTILINE,
    )


_AGE = _field("Age")
_OCCUPATION = _field("Occupation|Job Title|Job|Role")
_LOCATION = _field("Location|Geography")


def _capture(pattern: re.Pattern[str], chunk: str) -> str | None:
    match = pattern.search(chunk)
    if match is None:
        return None
    return match.group(1).replace("**", "").strip() or None


def _persona_name(chunk: str) -> str:
    first_line = chunk.lstrip(": \t\r\n-\u2013\u2014").split("\n", 1)[0]
    # "Age: 35" style label lines and sub-headers are not names
    if ":" not in first_line and not first_line.startswith("#"):
        name = _NAME_NOISE.sub("", first_line).strip()
        if name:
            return name

    match = _NAME_LINE.search(chunk)
    if match is not None:
        name = _NAME_NOISE.sub("", match.group(1)).strip()
        if name:
            return name
    return DEFAULT_NAME


class UserPersonaParser(FrameworkParser):
    """Personas split on `## Persona N` headers."""

    framework = "user-persona"

    def _extract(
        self,
        text: str,
        raw_citations: Sequence[RawCitation],
        scorer: ConfidenceScorer,
    ) -> tuple[UserPersonaData, list[Citation]]:
        citations = map_citations(raw_citations)
        cap = self.config.max_items_per_list
        personas: list[Persona] = []

        for chunk in _PERSONA_HEADER.split(text):
            if len(chunk) < MIN_CHUNK_CHARS:
                continue

            goals = self._items(chunk, "Goals")
            frustrations = self._items(chunk, "Frustrations|Pain Points|Pains")
            motivations = self._items(chunk, "Motivations|Drivers")
            if not goals and not frustrations:
                continue

            personas.append(
                Persona(
                    name=_persona_name(chunk),
                    demographics=Demographics(
                        age=_capture(_AGE, chunk),
                        occupation=_capture(_OCCUPATION, chunk),
                        location=_capture(_LOCATION, chunk),
                    ),
                    behavior=Behavior(
                        goals=goals[:cap],
                        frustrations=frustrations[:cap],
                        motivations=motivations[:cap],
                    ),
                )
            )

        scorer.require("personas", bool(personas), 50)
        if len(personas) < MIN_PERSONAS:
            scorer.penalize(
                20, f"Only {len(personas)} personas found; at least {MIN_PERSONAS} expected"
            )
        scorer.require_citations(citations, 15)

        return UserPersonaData(personas=personas), citations
