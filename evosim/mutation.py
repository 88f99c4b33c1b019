"""Point mutation of genome words."""

from __future__ import annotations

from typing import MutableSequence

from evosim.randoms import Randoms
from evosim.system import GenomeSystem


class MutationSystem(GenomeSystem):
    """Flips single bits in the genome words this system uses."""

    def __init__(self) -> None:
        super().__init__("Mutation System")

    def mutate(self, genome: MutableSequence[int], randoms: Randoms) -> None:
        """Flip one random bit of one random word in use, in place."""
        if not self.use_genome_words:
            raise ValueError("mutation system has no genome words in use")
        word = randoms.rand32() % len(self.use_genome_words)
        bit = randoms.rand8() & 31
        genome[self.use_genome_words[word]] ^= 1 << bit