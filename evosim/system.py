"""Base class for systems that act on chosen words of a genome."""

from __future__ import annotations

from typing import List, Sequence

WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1


def bit_count(word: int) -> int:
    """Number of set bits in a 32-bit word."""
    return bin(word & _WORD_MASK).count("1")


def _word_string(word: int) -> str:
    return format(word & _WORD_MASK, "032b")


def genome_string(genome: Sequence[int], size: int) -> str:
    """Binary text of the first ``size`` words, most significant bit first."""
    return "".join(_word_string(word) for word in genome[:size])


def number_for_char(c: str) -> int:
    """Word index for a character: 0-9 for digits, 10 upwards for letters, -1 otherwise."""
    if c.isdecimal():
        return int(c)
    if c.isalpha():
        code = ord(c.upper())
        if code > 255:
            code = 0
        return code - ord("A") + 10
    return -1


class GenomeSystem:
    """A named system that applies to a chosen list of genome words."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.use_genome_words: List[int] = []

    def set_genome_words_from_string(self, s: str, maxsize: int) -> None:
        """Set the words in use from text such as "01"; raise ValueError if out of range."""
        words = []
        for c in s:
            word = number_for_char(c)
            if word < 0 or word >= maxsize:
                self.use_genome_words = []
                raise ValueError(
                    f"can't convert {s!r} to genome word list - {c!r} is out of range"
                )
            words.append(word)
        self.use_genome_words = words

    def max_from_string(self, s: str) -> int:
        """Largest word index named in ``s``, or -1 if there is none."""
        return max((number_for_char(c) for c in s), default=-1)

    def words_in_use_string(self) -> str:
        """Text form of the words in use, the inverse of the setter."""
        return "".join(
            str(w) if w < 10 else chr(w + ord("A") - 10) for w in self.use_genome_words
        )

    def genome_in_use_string(self, genome: Sequence[int]) -> str:
        """Binary text of just the words this system uses."""
        return "".join(_word_string(genome[w]) for w in self.use_genome_words)

    def is_equal(self, a: Sequence[int], b: Sequence[int]) -> bool:
        """True when two genomes agree on every word in use."""
        return all(a[w] == b[w] for w in self.use_genome_words)

    def uses_word(self, n: int) -> bool:
        """True when word ``n`` is among the words in use."""
        return n in self.use_genome_words

    def report(self) -> str:
        """One-line description of the system and its words."""
        words = "".join(f"{w} " for w in self.use_genome_words)
        return f"System name: {self.name}   System uses genes: {words}"