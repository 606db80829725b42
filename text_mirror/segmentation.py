"""Extended grapheme cluster segmentation.

Clusters follow the default boundary rules of UAX #29 as implemented by the
``regex`` module's ``\\X``, so the Unicode version is the one ``regex`` ships.
"""

from typing import Iterator, List

import regex

_GRAPHEME = regex.compile(r"\X")


def grapheme_boundaries(text: str) -> Iterator[int]:
    """Yield the offsets of all grapheme cluster boundaries in ``text``.

    Offsets are code point indices. Both ends of the text are boundaries,
    so non-empty text yields ``0`` first and ``len(text)`` last; empty text
    yields nothing.
    """
    if not text:
        return

    yield 0
    for match in _GRAPHEME.finditer(text):
        yield match.end()


def iter_graphemes(text: str) -> Iterator[str]:
    """Lazily yield the grapheme clusters of ``text`` in order."""
    for match in _GRAPHEME.finditer(text):
        yield match.group()


def graphemes(text: str) -> List[str]:
    """Return the grapheme clusters of ``text`` as a list."""
    return _GRAPHEME.findall(text)


def grapheme_count(text: str) -> int:
    """Return the number of grapheme clusters in ``text``."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


class GraphemeClusters:
    """Restartable view of the grapheme clusters of a text.

    Every iteration re-scans the text, so the view can be consumed any
    number of times without holding on to the cluster list.

    Example:
        ..code-block:: python

            clusters = GraphemeClusters("e\\u0301a\\u0300")
            assert list(clusters) == ["e\\u0301", "a\\u0300"]
            assert list(reversed(clusters)) == ["a\\u0300", "e\\u0301"]
    """

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[str]:
        return iter_graphemes(self.text)

    def __reversed__(self) -> Iterator[str]:
        return reversed(graphemes(self.text))

    def __len__(self) -> int:
        return grapheme_count(self.text)

    def __bool__(self) -> bool:
        return bool(self.text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"
