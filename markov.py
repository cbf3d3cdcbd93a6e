from __future__ import annotations
from typing import Dict, List, Tuple, Optional, Sequence
import random

Prefix = Tuple[str, ...]
GramMap = Dict[Prefix, List[str]]


class MarkovError(Exception):
    """Base class for n-gram model errors."""


class EmptyModelError(MarkovError, LookupError):
    pass


class WindowLookupError(MarkovError, LookupError):
    pass


class CorpusTooShortError(MarkovError, ValueError):
    pass


def tokenize(text: str) -> List[str]:
    # Whitespace only, punctuation stays attached to words
    return text.split()


def build_map(tokens: Sequence[str], n: int, gram_map: GramMap):
    """
    Record every n-gram of `tokens` into `gram_map`, treating the corpus as circular.

    Each prefix of n-1 words maps to the list of words seen after it. Every token
    position is used as a suffix exactly once: the interior pass covers positions
    n-1 .. L-1 and the wrap-around pass covers 0 .. n-2. Existing entries are kept,
    so repeated calls accumulate.
    """
    size = len(tokens)
    if size == 0:
        return
    if size < n:
        raise CorpusTooShortError(f"corpus has {size} words, need at least {n}")

    for i in range(size - n + 1):
        prefix = tuple(tokens[i : i + n - 1])
        gram_map.setdefault(prefix, []).append(tokens[i + n - 1])

    for i in range(size - n + 1, size):
        tail = list(tokens[i:])
        prefix = tuple(tail + list(tokens[0 : n - 1 - len(tail)]))
        gram_map.setdefault(prefix, []).append(tokens[(i + n - 1) % size])


def generate_words(gram_map: GramMap, n: int, total_words: int, rng) -> List[str]:
    """
    Random walk over `gram_map` producing `total_words` words.

    `rng` only needs `randint(a, b)` with inclusive bounds.
    """
    keys = list(gram_map)
    if not keys:
        raise EmptyModelError("no prefixes recorded, build the map first")

    window = list(keys[rng.randint(0, len(keys) - 1)])
    out: List[str] = list(window)

    for _ in range(n, total_words + 1):
        try:
            suffixes = gram_map[tuple(window)]
        except KeyError:
            raise WindowLookupError(f"window {window!r} is not a recorded prefix") from None
        nxt = suffixes[rng.randint(0, len(suffixes) - 1)]
        out.append(nxt)
        window.pop(0)
        window.append(nxt)
    return out


def generate_text(gram_map: GramMap, n: int, total_words: int, rng) -> str:
    return "".join(word + " " for word in generate_words(gram_map, n, total_words, rng))


def clear_map(gram_map: GramMap):
    gram_map.clear()


def format_entry(prefix: Prefix, suffixes: Sequence[str]) -> str:
    return "{" + " ".join(prefix) + "} -> {" + " ".join(suffixes) + "}"


def format_map(gram_map: GramMap) -> List[str]:
    return [format_entry(prefix, suffixes) for prefix, suffixes in gram_map.items()]


class MarkovChain:
    """
    Word-level n-gram model with wrap-around boundaries.

    transitions: Dict[prefix_tuple, List[suffix]] (duplicates kept, so sampling an
    index uniformly weights each suffix by how often it was seen)
    """
    def __init__(self, order: int = 3):
        if order < 2:
            raise ValueError("order must be >= 2")
        self.order = order
        self.transitions: GramMap = {}

    def __len__(self) -> int:
        return len(self.transitions)

    def suffix_count(self) -> int:
        return sum(len(s) for s in self.transitions.values())

    def add_tokens(self, tokens: Sequence[str]):
        build_map(tokens, self.order, self.transitions)

    def add_text(self, text: str):
        self.add_tokens(tokenize(text))

    def add_file(self, path: str):
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            self.add_text(f.read())

    def generate_words(self, total_words: int, rng: Optional[random.Random] = None) -> List[str]:
        rng = rng or random.Random()
        return generate_words(self.transitions, self.order, total_words, rng)

    def generate_text(self, total_words: int, rng: Optional[random.Random] = None) -> str:
        rng = rng or random.Random()
        return generate_text(self.transitions, self.order, total_words, rng)

    def format_lines(self) -> List[str]:
        return format_map(self.transitions)

    def clear(self):
        clear_map(self.transitions)
