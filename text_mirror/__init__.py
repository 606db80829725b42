"""A tiny MCP service mirroring UTF-8 text one grapheme cluster at a time."""

from text_mirror.mirror import reverse, reverse_bytes
from text_mirror.segmentation import (
    GraphemeClusters,
    grapheme_boundaries,
    grapheme_count,
    graphemes,
    iter_graphemes,
)

__all__ = [
    "GraphemeClusters",
    "grapheme_boundaries",
    "grapheme_count",
    "graphemes",
    "iter_graphemes",
    "reverse",
    "reverse_bytes",
]
