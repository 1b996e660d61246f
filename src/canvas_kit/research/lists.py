# src/canvas_kit/research/lists.py

import re

from .sections import extract_section

_BULLET = re.compile(r"^[ \t]*(?:[-*]|\d{1,3}[.)])[ \t]+(.+)$", re.MULTILINE)

MAX_ITEM_CHARS = 200


def extract_list_items(
    text: str, header_alternatives: str, max_item_chars: int = MAX_ITEM_CHARS
) -> list[str]:
    """Bullet items under the first matching header, in document order.

    Lines starting with `-`, `*` or `1.` are items. Bold markers are removed
    and items that end up empty or at least `max_item_chars` long are dropped.
    """
    section = extract_section(text, header_alternatives)
    if not section:
        return []

    items: list[str] = []
    for match in _BULLET.finditer(section):
        item = match.group(1).replace("**", "").strip()
        if 0 < len(item) < max_item_chars:
            items.append(item)
    return items
