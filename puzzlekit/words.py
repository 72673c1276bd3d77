"""Word puzzles: frequencies, T9 keypads, numbers in English, suffix search, name synonyms."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping, Sequence
from itertools import product

T9_LETTERS: tuple[str, ...] = (
    "", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz",
)

_ONES = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)
_SCALES = ("", "thousand", "million", "billion")


def word_frequency(word: str, book: Iterable[str]) -> int:
    """Count the words of ``book`` that, lower-cased, equal ``word``."""
    return sum(1 for entry in book if entry.lower() == word)


def build_frequency_table(book: Iterable[str]) -> dict[str, int]:
    """Return a table of lower-cased word to number of occurrences."""
    return dict(Counter(entry.lower() for entry in book))


def lookup_frequency(table: Mapping[str, int], word: str) -> int:
    """Return how often ``word`` (case-insensitively) occurs in ``table``."""
    if not word:
        raise ValueError("word must not be empty")
    return table.get(word.lower(), 0)


def t9_words(digits: str, letter_map: Sequence[str] | None = None) -> list[str]:
    """Return every letter sequence the keypad ``digits`` can spell, in keypad order."""
    letters = T9_LETTERS if letter_map is None else letter_map
    choices = []
    for digit in digits:
        if not digit.isdigit() or int(digit) >= len(letters):
            raise ValueError(f"no keypad entry for {digit!r}")
        choices.append(letters[int(digit)])
    return ["".join(combination) for combination in product(*choices)]


def _chunk_words(number: int) -> list[str]:
    words = []
    hundreds, rest = divmod(number, 100)
    if hundreds:
        words += [_ONES[hundreds], "hundred"]
    if rest >= 20:
        tens, ones = divmod(rest, 10)
        words.append(_TENS[tens])
        if ones:
            words.append(_ONES[ones])
    elif rest:
        words.append(_ONES[rest])
    return words


def int_to_english(number: int) -> str:
    """Describe ``number`` in English words, e.g. ``"one thousand two hundred"``."""
    if number == 0:
        return _ONES[0]
    if number < 0:
        return "negative " + int_to_english(-number)
    chunks = []
    while number:
        number, chunk = divmod(number, 1000)
        chunks.append(chunk)
    if len(chunks) > len(_SCALES):
        raise ValueError("number too large to describe")
    words: list[str] = []
    for scale, chunk in reversed(list(zip(_SCALES, chunks))):
        if chunk:
            words += _chunk_words(chunk)
            if scale:
                words.append(scale)
    return " ".join(words)


class SuffixTrie:
    """A trie of every suffix of a text, for finding where patterns occur."""

    def __init__(self, text: str = "") -> None:
        self._root: dict[str, tuple[dict, list[int]]] = {}
        for position in range(len(text)):
            self.insert(text[position:], position)

    def insert(self, suffix: str, position: int) -> None:
        """Add ``suffix``, recording that it starts at ``position`` in the text."""
        children = self._root
        for char in suffix:
            node = children.setdefault(char, ({}, []))
            node[1].append(position)
            children = node[0]

    def search(self, pattern: str) -> list[int]:
        """Return the start positions at which ``pattern`` occurs."""
        children = self._root
        positions: list[int] = []
        for char in pattern:
            node = children.get(char)
            if node is None:
                return []
            children, positions = node
        return list(positions)


def true_frequencies(
    frequencies: Mapping[str, int], synonyms: Iterable[tuple[str, str]]
) -> dict[str, int]:
    """Merge the frequencies of synonymous names.

    Synonymy is symmetric and transitive. Each group is reported under its
    first name met in ``frequencies`` (then in ``synonyms``); names known
    only from ``synonyms`` count as zero.
    """
    graph: dict[str, set[str]] = defaultdict(set)
    for first, second in synonyms:
        graph[first].add(second)
        graph[second].add(first)

    names = dict.fromkeys(list(frequencies) + list(graph))
    visited: set[str] = set()
    totals: dict[str, int] = {}
    for name in names:
        if name in visited:
            continue
        visited.add(name)
        stack = [name]
        total = 0
        while stack:
            current = stack.pop()
            total += frequencies.get(current, 0)
            for neighbour in graph.get(current, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        totals[name] = total
    return totals