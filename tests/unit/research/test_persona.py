import pytest

from canvas_kit.research.parsers import UserPersonaParser
from canvas_kit.research.types import RawCitation

CITATIONS = [RawCitation(title="Survey 2024", url="https://survey.example/2024")]

EMMA = """## Persona 1

Name: Enterprise Emma

Age: 35-45
Occupation: VP of Engineering
Location: San Francisco Bay Area

### Goals
- Improve team productivity
- Reduce operational costs
- Scale engineering processes

### Frustrations
- Too many disconnected tools
- Lack of visibility into progress
- Slow vendor onboarding

### Motivations
- Career advancement
- Team success
"""

DAN = """## Persona 2: "Developer Dan"

**Age:** 25-34
**Role:** Backend engineer

### Goals
- Ship features faster

### Pain Points
- Flaky CI pipelines
"""


@pytest.fixture
def parser() -> UserPersonaParser:
    return UserPersonaParser()


class TestUserPersonaParser:
    def test_extracts_persona(self, parser: UserPersonaParser) -> None:
        result = parser.parse(EMMA, CITATIONS)

        assert len(result.data.personas) == 1
        emma = result.data.personas[0]
        assert emma.name == "Enterprise Emma"
        assert emma.demographics.age == "35-45"
        assert emma.demographics.occupation == "VP of Engineering"
        assert emma.demographics.location == "San Francisco Bay Area"
        assert len(emma.behavior.goals) == 3
        assert len(emma.behavior.frustrations) == 3
        assert emma.behavior.motivations == ["Career advancement", "Team success"]

    def test_single_persona_is_penalized(self, parser: UserPersonaParser) -> None:
        result = parser.parse(EMMA, CITATIONS)

        assert result.confidence == 80
        assert any("Only 1" in w for w in result.warnings)

    def test_two_personas(self, parser: UserPersonaParser) -> None:
        result = parser.parse(EMMA + "\n" + DAN, CITATIONS)

        assert [p.name for p in result.data.personas] == [
            "Enterprise Emma",
            "Developer Dan",
        ]
        dan = result.data.personas[1]
        assert dan.demographics.age == "25-34"
        assert dan.demographics.occupation == "Backend engineer"
        assert dan.behavior.frustrations == ["Flaky CI pipelines"]
        assert result.confidence == 100

    def test_caps_goals_at_five(self, parser: UserPersonaParser) -> None:
        goals = "\n".join(f"- Goal number {i}" for i in range(8))
        content = f"## Persona 1\n\nName: Busy Bea\n\n### Goals\n{goals}\n"

        result = parser.parse(content, CITATIONS)

        assert result.data.personas[0].behavior.goals == [
            f"Goal number {i}" for i in range(5)
        ]

    def test_unnamed_persona(self, parser: UserPersonaParser) -> None:
        content = (
            "## Persona 1\n\n### Goals\n- Find a reliable supplier quickly\n"
            "- Keep costs predictable\n"
        )

        result = parser.parse(content, CITATIONS)

        assert result.data.personas[0].name == "Unnamed Persona"

    @pytest.mark.parametrize("separator", ["-", "\u2013", "\u2014"])
    def test_dash_separated_header_name(
        self, parser: UserPersonaParser, separator: str
    ) -> None:
        content = (
            f"## Persona 1 {separator} Sarah Chen\n\nAge: 30-40\n\n"
            "### Goals\n- Close the books faster\n"
        )

        result = parser.parse(content, CITATIONS)

        assert result.data.personas[0].name == "Sarah Chen"

    def test_chunk_without_goals_or_frustrations_is_skipped(
        self, parser: UserPersonaParser
    ) -> None:
        content = (
            "## Persona 1\n\nName: Quiet Quinn\n\nAge: 40\n"
            "Occupation: Accountant at a mid-size firm\n"
        )

        result = parser.parse(content, CITATIONS)

        assert result.data.personas == []

    def test_no_personas(self, parser: UserPersonaParser) -> None:
        result = parser.parse("No personas identified.", CITATIONS)

        assert result.data.personas == []
        assert "personas" in result.missing_fields
        assert result.confidence == 30

    def test_missing_citations_cost_15(self, parser: UserPersonaParser) -> None:
        result = parser.parse(EMMA + "\n" + DAN, [])

        assert result.confidence == 85
