"""Genome comparison used to decide species membership."""

from __future__ import annotations

from typing import List, Sequence

from evosim.system import GenomeSystem, bit_count

MAX_MASKS = 5
MAX_BIN_ENTRIES = 25


def _build_masks() -> tuple:
    masks: List[int] = []
    max_counts: List[int] = []
    for i in range(MAX_MASKS):
        bits = range(0, 32, i + 1)
        masks.append(sum(1 << j for j in bits))
        max_counts.append(len(bits) + 1)
    return masks, max_counts


class SpeciesIDSystem(GenomeSystem):
    """Counts bits and genome differences over the words in use."""

    def __init__(self) -> None:
        super().__init__("Species ID system")
        # Mask 0 is every bit, mask 1 every other bit, mask 2 every third bit...
        self.mask, self.max_bit_count_per_word = _build_masks()

    def bitcount_all(self, genome: Sequence[int]) -> int:
        """Total set bits over the words in use."""
        return sum(bit_count(genome[w]) for w in self.use_genome_words)

    def bitcount_all_masked(self, genome: Sequence[int], mask_id: int) -> int:
        """Total set bits over the words in use with a level mask applied."""
        if mask_id == 0:
            return self.bitcount_all(genome)
        mask = self.mask[mask_id]
        return sum(bit_count(genome[w] & mask) for w in self.use_genome_words)

    def is_compatible(
        self, genome: Sequence[int], partner: Sequence[int], max_difference: int
    ) -> bool:
        """True when the genomes differ in at most ``max_difference`` bits."""
        bitcount = 0
        for w in self.use_genome_words:
            bitcount += bit_count(genome[w] ^ partner[w])
            if bitcount > max_difference:
                return False
        return True