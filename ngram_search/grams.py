"""
Character n-gram generation.

This module turns strings into sets of overlapping codepoint substrings
("grams") and provides the boundary wrapper used for start/end sensitive
matching.
"""

import unicodedata
from typing import Set

DEFAULT_DEPTH = 6

# Control characters that ordinary text never contains
START_MARKER = "\x02"
END_MARKER = "\x03"


def normalize(text: str) -> str:
    """
    Normalize text to its canonical decomposed form and lowercase it.

    Precomposed and combining-mark spellings of the same character end up
    identical, as do upper and lower case variants.

    Args:
        text: Text to normalize.

    Returns:
        The NFD-normalized, lowercased text.
    """
    return unicodedata.normalize("NFD", text).lower()


def generate(text: str, depth: int = DEFAULT_DEPTH) -> Set[str]:
    """
    Make the set of character n-grams of a string, to a given depth.

    Grams are contiguous runs of codepoints of length 2 up to ``depth + 1``
    taken from the normalized text. Runs that would extend past the end of
    the string are skipped.

    Args:
        text: Source text.
        depth: Maximum gram length minus one.

    Returns:
        Set of grams. Empty for depth 0 or text shorter than two codepoints.
    """
    grams = set()
    norm = normalize(text)
    length = len(norm)
    for i in range(length):
        for j in range(min(depth, length - i)):
            end = i + j + 2
            if end > length:
                break
            grams.add(norm[i:end])
    return grams


def wrap(text: str) -> str:
    """Bracket text with the start and end markers."""
    return START_MARKER + text + END_MARKER
