# src/canvas_kit/research/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for research parsing.

    Immutable. Explicit. No magic defaults from environment.
    """

    max_content_chars: int = 200_000  # Longer input is parsed on its prefix only
    max_list_item_chars: int = 200
    max_items_per_list: int = 5  # Cap for competitor and persona sub-lists
