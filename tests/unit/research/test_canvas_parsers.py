from canvas_kit.research.parsers import (
    BusinessModelCanvasParser,
    LeanCanvasParser,
    ValuePropositionCanvasParser,
)
from canvas_kit.research.types import RawCitation

CITATIONS = [RawCitation(title="Source", url="https://source.example")]

BMC = """## Customer Segments
- Small businesses
- Freelancers

## Value Propositions
- Save 10 hours per week

## Channels
- Direct sales
- App marketplaces

## Customer Relationships
- Self-service onboarding

## Revenue Streams
- Monthly subscriptions

## Key Resources
- Engineering team

## Key Activities
- Product development

## Key Partnerships
- Accounting firms

## Cost Structure
- Cloud hosting
"""

LEAN = """## Problem
- Manual data entry wastes time
- Errors in financial reports
- No real-time visibility

## Customer Segments
- SMB finance teams

## Unique Value Proposition
Automate your operations in one click.

## Solution
- Automated bank sync

## Channels
- Content marketing

## Revenue Streams
- Tiered subscriptions

## Cost Structure
- Hosting

## Key Metrics
- Monthly active users

## Unfair Advantage
Exclusive data partnerships with regional banks.
"""

VPC = """## Jobs
- Track expenses
- File taxes
- Pay vendors

## Pains
- Tedious reconciliation
- Missed deadlines
- Costly mistakes

## Gains
- Peace of mind
- More free time

## Solutions
- Expense tracker
- Tax filing assistant
- Vendor payments

## Pain Relievers
- Automatic reconciliation
- Deadline reminders

## Gain Creators
- Weekly summaries
- Time-saved dashboard
"""


class TestBusinessModelCanvasParser:
    def test_extracts_all_blocks(self) -> None:
        result = BusinessModelCanvasParser().parse(BMC, CITATIONS)

        data = result.data
        assert [s.segment for s in data.customer_segments] == [
            "Small businesses",
            "Freelancers",
        ]
        assert data.value_propositions[0].proposition == "Save 10 hours per week"
        assert len(data.channels) == 2
        assert data.customer_relationships[0].relationship == "Self-service onboarding"
        assert data.revenue_streams[0].stream == "Monthly subscriptions"
        assert data.key_resources[0].resource == "Engineering team"
        assert data.key_activities[0].activity == "Product development"
        assert data.key_partnerships[0].partner == "Accounting firms"
        assert data.cost_structure[0].cost == "Cloud hosting"
        assert result.confidence == 100

    def test_only_four_blocks_are_required(self) -> None:
        content = BMC.split("## Key Resources")[0].replace(
            "## Customer Relationships\n- Self-service onboarding\n", ""
        )

        result = BusinessModelCanvasParser().parse(content, CITATIONS)

        assert result.missing_fields == []
        assert result.confidence == 100

    def test_partial_canvas(self) -> None:
        result = BusinessModelCanvasParser().parse(
            "## Customer Segments\n- Small businesses", []
        )

        assert result.missing_fields == [
            "valuePropositions",
            "channels",
            "revenueStreams",
        ]
        assert result.confidence == 60


class TestLeanCanvasParser:
    def test_extracts_canvas(self) -> None:
        result = LeanCanvasParser().parse(LEAN, CITATIONS)

        data = result.data
        assert len(data.problem) == 3
        assert data.customer_segments[0].segment == "SMB finance teams"
        assert (
            data.unique_value_proposition.proposition
            == "Automate your operations in one click."
        )
        assert data.solution[0].feature == "Automated bank sync"
        assert data.channels == ["Content marketing"]
        assert data.key_metrics[0].metric == "Monthly active users"
        assert data.unfair_advantage == "Exclusive data partnerships with regional banks."
        assert result.confidence == 100

    def test_placeholder_proposition(self) -> None:
        result = LeanCanvasParser().parse("Basic content without structure", [])

        assert (
            result.data.unique_value_proposition.proposition
            == "Value proposition not extracted"
        )
        assert result.missing_fields == ["problem", "customerSegments"]
        assert result.confidence == 60
        assert result.data.unfair_advantage is None

    def test_proposition_skips_short_lines(self) -> None:
        content = (
            "## UVP\n- Short\n- **The only platform** that syncs ops data\n"
        )

        result = LeanCanvasParser().parse(content, [])

        assert (
            result.data.unique_value_proposition.proposition
            == "The only platform that syncs ops data"
        )


class TestValuePropositionCanvasParser:
    def test_extracts_profile_and_value_map(self) -> None:
        result = ValuePropositionCanvasParser().parse(VPC, CITATIONS)

        profile = result.data.customer_profile
        value_map = result.data.value_map
        assert [j.job for j in profile.customer_jobs] == [
            "Track expenses",
            "File taxes",
            "Pay vendors",
        ]
        assert len(profile.pains) == 3
        assert len(profile.gains) == 2
        assert len(value_map.products_and_services) == 3
        assert value_map.pain_relievers[0].reliever == "Automatic reconciliation"
        assert value_map.gain_creators[1].creator == "Time-saved dashboard"
        assert result.confidence == 100

    def test_missing_profile(self) -> None:
        result = ValuePropositionCanvasParser().parse("## Solutions\n- Tracker", [])

        assert result.missing_fields == [
            "customerProfile.customerJobs",
            "customerProfile.pains",
            "customerProfile.gains",
        ]
        assert result.confidence == 45

    def test_wire_shape_uses_camel_case(self) -> None:
        payload = ValuePropositionCanvasParser().parse(VPC, CITATIONS).to_dict()

        assert set(payload["data"]) == {"customerProfile", "valueMap"}
        assert set(payload["data"]["valueMap"]) == {
            "productsAndServices",
            "painRelievers",
            "gainCreators",
        }
