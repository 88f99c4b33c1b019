"""A grid of pathogen genomes that can kill organisms they do not resemble."""

from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from evosim.randoms import Randoms
from evosim.settings import MAX_GENOME_WORDS, PathogenMode
from evosim.system import GenomeSystem, bit_count

_WORD_MASK = 0xFFFFFFFF


class PathogensSystem(GenomeSystem):
    """Pathogen overlay: ``depth`` pathogen genomes for every grid cell."""

    def __init__(
        self,
        grid_x: int = 100,
        grid_y: int = 100,
        depth: int = 5,
        words_per_pathogen: int = MAX_GENOME_WORDS,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__("Pathogen System")
        self.grid_x = grid_x
        self.grid_y = grid_y
        self.depth = depth
        self.words_per_pathogen = words_per_pathogen
        self._rng = rng if rng is not None else random.Random()
        self.probability_distribution: List[int] = []
        self.pathogens: List[List[List[List[int]]]] = []
        self.reset()

    def reset(self) -> None:
        """Fill every pathogen slot with fresh random words."""
        getrandbits = self._rng.getrandbits
        self.pathogens = [
            [
                [
                    [getrandbits(32) for _ in range(self.words_per_pathogen)]
                    for _ in range(self.depth)
                ]
                for _ in range(self.grid_y)
            ]
            for _ in range(self.grid_x)
        ]

    def set_genome_words_from_string(self, s: str, maxsize: int) -> None:
        """Set the words in use and rebuild the kill probability table."""
        try:
            super().set_genome_words_from_string(s, maxsize)
        finally:
            self._redo_probability_distribution()

    def _redo_probability_distribution(self) -> None:
        length = len(self.use_genome_words) * 32
        if length == 0:
            self.probability_distribution = []
            return
        step = 4294967295 // (length * 2)
        self.probability_distribution = [
            (2147483648 + cnt * step) & _WORD_MASK for cnt in range(length)
        ]

    def will_die(
        self, genome: Sequence[int], n: int, m: int, c: int, randoms: Randoms
    ) -> bool:
        """Decide whether pathogen ``c`` at cell (n, m) kills an organism."""
        pathogen = self.pathogens[n][m][c]
        bitcount = sum(
            bit_count(genome[w] ^ pathogen[w]) for w in self.use_genome_words
        )
        if bitcount >= len(self.probability_distribution):
            return False
        return randoms.rand32() >= self.probability_distribution[bitcount]

    def _flip_random_bit(self, pathogen: List[int], randoms: Randoms) -> None:
        word = randoms.rand32() % len(self.use_genome_words)
        bit = randoms.rand8() & 31
        pathogen[self.use_genome_words[word]] ^= 1 << bit

    def mutate(self, randoms: Randoms, mutate_chance: int) -> None:
        """Drift mode: in each cell, maybe flip a bit of the first pathogen."""
        for column in self.pathogens:
            for cell in column:
                if randoms.rand8() < mutate_chance:
                    self._flip_random_bit(cell[0], randoms)

    def replicate(
        self,
        nlocal: int,
        mlocal: int,
        n: int,
        m: int,
        c: int,
        randoms: Randoms,
        mutate_chance: int,
    ) -> None:
        """Copy pathogen ``c`` of (nlocal, mlocal), maybe mutate it, and place it at (n, m)."""
        baby = list(self.pathogens[nlocal][mlocal][c])
        if randoms.rand8() < mutate_chance:
            self._flip_random_bit(baby, randoms)
        new_depth = self._rng.randrange(self.depth)
        self.pathogens[n][m][new_depth] = baby

    def colour(
        self, n: int, m: int, word: int, mode: PathogenMode
    ) -> Tuple[int, int, int]:
        """RGB colour of one word of the cell's pathogens (modal word unless drifting)."""
        if not self.use_genome_words:
            raise ValueError("pathogen system has no genome words in use")
        if word >= len(self.use_genome_words):
            word = len(self.use_genome_words) - 1
        index = self.use_genome_words[word]
        cell = self.pathogens[n][m]
        if mode == PathogenMode.DRIFT:
            genome = cell[0][index]
        else:
            counts = Counter(pathogen[index] for pathogen in cell)
            genome = counts.most_common(1)[0][0]
        genome &= _WORD_MASK
        b = bit_count(genome & 2047) * 23
        genome //= 2048
        g = bit_count(genome & 2047) * 23
        genome //= 2048
        r = bit_count(genome) * 25
        return (r, g, b)