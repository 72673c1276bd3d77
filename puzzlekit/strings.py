"""String puzzles: permutations, uniqueness, edits, compression and friends."""

from __future__ import annotations

from collections import Counter
from itertools import groupby

_ASCII_SIZE = 128


def check_permutation(first: str, second: str) -> bool:
    """Return True if ``second`` is a permutation of ``first`` (by character counts)."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def check_permutation_sorted(first: str, second: str) -> bool:
    """Return True if both strings consist of the same characters, compared after sorting."""
    return sorted(first) == sorted(second)


def has_duplicates(text: str) -> bool:
    """Return True if an ASCII string repeats any character.

    Raises ValueError for text that is not ASCII.
    """
    if not text.isascii():
        raise ValueError("text must be ASCII")
    if len(text) > _ASCII_SIZE:
        return True
    return len(set(text)) != len(text)


def _one_replacement_away(first: str, second: str) -> bool:
    return sum(a != b for a, b in zip(first, second)) <= 1


def _one_removal_away(longer: str, shorter: str) -> bool:
    """True if removing one character from ``longer`` yields ``shorter``."""
    for index, (a, b) in enumerate(zip(longer, shorter)):
        if a != b:
            return longer[index + 1:] == shorter[index:]
    return True


def is_one_edit_away(first: str, second: str) -> bool:
    """Return True if the strings are at most one insert, removal or replacement apart."""
    if len(first) == len(second):
        return _one_replacement_away(first, second)
    if len(first) - 1 == len(second):
        return _one_removal_away(first, second)
    if len(second) - 1 == len(first):
        return _one_removal_away(second, first)
    return False


def can_form_palindrome(text: str) -> bool:
    """Return True if the letters of ``text`` can be rearranged into a palindrome.

    Letters are compared case-insensitively; anything that is not an ASCII
    letter is ignored.
    """
    counts = Counter(
        char.lower() for char in text if char.isascii() and char.isalpha()
    )
    odd = sum(1 for count in counts.values() if count % 2)
    return odd <= 1


def compress(text: str) -> str:
    """Run-length encode ``text`` as char+count, unless that is not shorter."""
    result = "".join(f"{char}{sum(1 for _ in run)}" for char, run in groupby(text))
    return text if len(result) >= len(text) else result


def urlify(text: str, length: int) -> str:
    """Replace each space within the first ``length`` characters with ``%20``."""
    if not 0 <= length <= len(text):
        raise ValueError(f"length {length} out of range for text of {len(text)} characters")
    return text[:length].replace(" ", "%20")


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]