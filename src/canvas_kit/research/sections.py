# src/canvas_kit/research/sections.py

"""Markdown header location and section segmentation.

A header is a line starting with one or more `#` characters. A section is
the text after a header up to the next header of any level, or the end
of the document. Header alternatives are regex alternation strings such
as `"TAM|Total Addressable Market"` and match case-insensitively.
"""

import logging
import re
from collections.abc import Mapping

from .types import SectionSpan

logger = logging.getLogger(__name__)

_NEXT_HEADER = re.compile(r"^[ \t]*#", re.MULTILINE)
_LEVEL2_HEADER = re.compile(r"^[ \t]*##[ \t]+", re.MULTILINE)


def header_pattern(header_alternatives: str) -> re.Pattern[str]:
    """Compile the pattern matching a header line for any alternative."""
    return re.compile(
        rf"^[ \t]*#+[ \t]*(?:{header_alternatives})(?!\w)[^\n]*",
        re.IGNORECASE | re.MULTILINE,
    )


def find_header(text: str, header_alternatives: str) -> re.Match[str] | None:
    return header_pattern(header_alternatives).search(text)


def extract_section(text: str, header_alternatives: str) -> str:
    """Return the trimmed text between the matched header and the next header.

    The rest of the header line after the matched alternative is part of the
    section body, so `## TAM: $50B` yields `$50B`. Returns "" when no header
    matches.
    """
    pattern = re.compile(
        rf"^[ \t]*#+[ \t]*(?:{header_alternatives})(?!\w)[: \t]*",
        re.IGNORECASE | re.MULTILINE,
    )
    match = pattern.search(text)
    if match is None:
        return ""

    body_start = match.end()
    next_header = _NEXT_HEADER.search(text, body_start)
    body_end = next_header.start() if next_header else len(text)
    return text[body_start:body_end].strip()


def locate_sections(
    text: str, field_headers: Mapping[str, str]
) -> dict[str, SectionSpan]:
    """Compute each field's span within the document.

    Spans are derived by sorting the first header match of every field by
    offset and ending each span where the next one starts (or at the end of
    the document). Fields with no matching header get no span.
    """
    starts: list[tuple[int, str]] = []
    for field_name, alternatives in field_headers.items():
        match = find_header(text, alternatives)
        if match is not None:
            starts.append((match.start(), field_name))

    starts.sort(key=lambda item: item[0])

    spans: dict[str, SectionSpan] = {}
    for position, (start, field_name) in enumerate(starts):
        end = starts[position + 1][0] if position + 1 < len(starts) else len(text)
        spans[field_name] = SectionSpan(field_name=field_name, start=start, end=end)

    logger.debug(
        "Located %d of %d sections: %s",
        len(spans),
        len(field_headers),
        ", ".join(spans),
    )
    # Keep the caller's field order for citation attribution
    return {name: spans[name] for name in field_headers if name in spans}


def split_level2_blocks(text: str) -> list[str]:
    """Split on `## ` headers.

    Each block starts right after its `## ` marker, so its first line is the
    header text. Deeper headers (`###`) stay inside their block. Text before
    the first `## ` header is returned as the first block.
    """
    blocks: list[str] = []
    previous = 0
    for match in _LEVEL2_HEADER.finditer(text):
        blocks.append(text[previous : match.start()])
        previous = match.end()
    blocks.append(text[previous:])
    return blocks
