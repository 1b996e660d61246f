from canvas_kit.research.citations import map_citations
from canvas_kit.research.types import RawCitation, SectionSpan

SPANS = {
    "tam.value": SectionSpan("tam.value", 0, 10),
    "sam.value": SectionSpan("sam.value", 10, 20),
}


def test_deduplicates_by_url_keeping_first_title() -> None:
    raw = [
        RawCitation(title="Report A", url="https://example.com/a"),
        RawCitation(title="Report A (mirror)", url="https://example.com/a"),
        RawCitation(title="Report B", url="https://example.com/b"),
    ]

    citations = map_citations(raw)

    assert [c.title for c in citations] == ["Report A", "Report B"]
    assert [c.url for c in citations] == [
        "https://example.com/a",
        "https://example.com/b",
    ]


def test_ids_are_unique_and_prefixed() -> None:
    raw = [RawCitation(title=f"R{i}", url=f"https://example.com/{i}") for i in range(20)]

    citations = map_citations(raw)

    ids = [c.id for c in citations]
    assert len(set(ids)) == len(ids)
    assert all(i.startswith("cit-") for i in ids)


def test_one_access_time_per_call() -> None:
    raw = [
        RawCitation(title="A", url="https://a.example"),
        RawCitation(title="B", url="https://b.example"),
    ]

    citations = map_citations(raw)

    assert citations[0].accessed_at == citations[1].accessed_at
    assert citations[0].accessed_at.endswith("Z")


def test_attributes_fields_by_start_index() -> None:
    raw = [
        RawCitation(title="A", url="https://a.example", start_index=5),
        RawCitation(title="B", url="https://b.example", start_index=10),
        RawCitation(title="C", url="https://c.example", start_index=25),
        RawCitation(title="D", url="https://d.example"),
    ]

    citations = map_citations(raw, SPANS)

    assert [c.relevant_fields for c in citations] == [
        ["tam.value"],
        ["sam.value"],
        [],
        [],
    ]


def test_overlapping_spans_follow_mapping_order() -> None:
    spans = {
        "second": SectionSpan("second", 0, 50),
        "first": SectionSpan("first", 0, 20),
    }

    citations = map_citations(
        [RawCitation(title="A", url="https://a.example", start_index=3)], spans
    )

    assert citations[0].relevant_fields == ["second", "first"]


def test_without_spans_fields_stay_empty() -> None:
    citations = map_citations(
        [RawCitation(title="A", url="https://a.example", start_index=3)]
    )

    assert citations[0].relevant_fields == []


def test_camel_case_dump() -> None:
    citation = map_citations([RawCitation(title="A", url="https://a.example")])[0]

    dumped = citation.model_dump(by_alias=True)

    assert set(dumped) == {"id", "title", "url", "accessedAt", "relevantFields"}
