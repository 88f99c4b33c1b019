"""Genome records used while grouping organisms into species."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(eq=False)
class SortableGenome:
    """A genome with its fitness and occurrence count; sorts most common first."""

    genome: Sequence[int]
    genome_length: int
    fit: int
    count: int
    group: int = 0

    def __lt__(self, other: "SortableGenome") -> bool:
        return self.count > other.count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortableGenome):
            return NotImplemented
        length = self.genome_length
        return list(self.genome[:length]) == list(other.genome[:length])

    __hash__ = None  # type: ignore[assignment]


@dataclass
class SpeciesBinEntry:
    """A distinct genome with its occurrence count and species group."""

    genome: Sequence[int] = field(default_factory=list)
    occurrence_count: int = 1
    group: int = -1
    index: int = 0
    positions: List[int] = field(default_factory=list)


def sort_by_count(genomes: Iterable[SortableGenome]) -> List[SortableGenome]:
    """Genomes ordered from most to least frequent, ties kept in input order."""
    return sorted(genomes)