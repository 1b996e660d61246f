import re

import pytest

from canvas_kit.research.numeric import extract_number, extract_percentage


class TestExtractNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("The market is $1.5 trillion.", 1_500_000_000_000),
            ("Target segment is $500 million.", 500_000_000),
            ("Initial target is $25 million.", 25_000_000),
            ("Valued at $50 billion annually", 50_000_000_000),
            ("About $750k in year one", 750_000),
            ("$100B", 100_000_000_000),
        ],
    )
    def test_scales_by_unit(self, text: str, expected: float) -> None:
        assert extract_number(text) == expected

    def test_strips_thousands_separators(self) -> None:
        assert extract_number("Revenue of $1,250,000 last year") == 1_250_000

    def test_usd_prefix(self) -> None:
        assert extract_number("Estimated at USD 2.5B") == 2_500_000_000

    def test_unit_before_currency_word(self) -> None:
        assert extract_number("Roughly 1,200 million dollars") == 1_200_000_000

    def test_pattern_priority_beats_position(self) -> None:
        """A later `$` amount wins over an earlier `USD` suffix amount."""
        text = "Reports range from 40 billion USD up to $12 billion."

        assert extract_number(text) == 12_000_000_000

    def test_case_insensitive_units(self) -> None:
        assert extract_number("$3 BILLION") == 3_000_000_000

    def test_letter_inside_word_is_not_a_unit(self) -> None:
        assert extract_number("Costs $5 more per seat") == 5

    def test_returns_none_when_nothing_matches(self) -> None:
        assert extract_number("No market data available.") is None

    def test_caller_supplied_patterns(self) -> None:
        patterns = [re.compile(r"EUR\s*(\d+)\s*(m)?", re.IGNORECASE)]

        assert extract_number("EUR 40m", patterns) == 40_000_000


class TestExtractPercentage:
    def test_integer_percentage(self) -> None:
        assert extract_percentage("CAGR of 15% expected") == 15

    def test_decimal_with_space(self) -> None:
        assert extract_percentage("growing 12.5 % per year") == 12.5

    def test_first_occurrence_wins(self) -> None:
        assert extract_percentage("8% in 2024, 11% in 2025") == 8

    def test_returns_none_without_percent_sign(self) -> None:
        assert extract_percentage("growing fast") is None
