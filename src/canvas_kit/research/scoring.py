# src/canvas_kit/research/scoring.py

from collections.abc import Sized

MAX_CONFIDENCE = 100


class ConfidenceScorer:
    """Accumulates penalties against a starting score of 100.

    Each parser owns one scorer per call. The final score is
    `max(0, 100 - total penalties)`.
    """

    def __init__(self) -> None:
        self._penalty = 0
        self.missing_fields: list[str] = []
        self.warnings: list[str] = []

    def require(self, field_path: str, present: bool, penalty: int) -> None:
        """Penalize and record `field_path` as missing unless `present`."""
        if not present:
            self.missing_fields.append(field_path)
            self._penalty += penalty

    def penalize(self, penalty: int, warning: str | None = None) -> None:
        self._penalty += penalty
        if warning:
            self.warnings.append(warning)

    def warn(self, warning: str) -> None:
        self.warnings.append(warning)

    def require_citations(self, citations: Sized, penalty: int) -> None:
        if len(citations) == 0:
            self._penalty += penalty

    @property
    def confidence(self) -> int:
        return max(0, MAX_CONFIDENCE - self._penalty)
