"""Grapheme-cluster-safe text reversal."""

import regex

from text_mirror.segmentation import graphemes

REPLACEMENT_CHARACTER = "\ufffd"

_LONE_SURROGATE = regex.compile("[\ud800-\udfff]")


def reverse(text: str) -> str:
    """Reverse the order of the grapheme clusters in ``text``.

    The code points inside each cluster keep their order, so combining marks,
    emoji ZWJ sequences, flags and the like come out intact. Reversing twice
    does not always give back the original text: clusters are recomputed on
    the reversed text, and characters such as prepended marks or odd regional
    indicators can group differently the second time around.
    """
    clusters = graphemes(text)
    clusters.reverse()
    return "".join(clusters)


def decode_text(data: bytes) -> str:
    """Decode UTF-8 ``data``, replacing each malformed subsequence with U+FFFD."""
    return data.decode("utf-8", errors="replace")


def scrub_surrogates(text: str) -> str:
    """Replace lone surrogates, which cannot be encoded as UTF-8, with U+FFFD."""
    return _LONE_SURROGATE.sub(REPLACEMENT_CHARACTER, text)


def reverse_bytes(data: bytes) -> str:
    """Reverse UTF-8 encoded ``data``; malformed bytes become U+FFFD first."""
    return reverse(decode_text(data))
