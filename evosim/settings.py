"""Simulation-wide settings that apply to every cell of the grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

MAX_GENOME_WORDS = 128


class EnvironmentMode(IntEnum):
    """How the environment image sequence is cycled."""

    STATIC = 0
    ONCE = 1
    LOOP = 2
    BOUNCE = 3


class PathogenMode(IntEnum):
    """Whether pathogens drift at random or evolve."""

    DRIFT = 0
    EVOLVE = 1


class TrophicSeedMode(IntEnum):
    """How many trophic tiers are seeded at the start of a run."""

    DEFAULT = 0
    THREE_TIER = 1
    FIVE_TIER = 2


class ReseedMode(IntEnum):
    """How the grid is seeded at the start of a run."""

    SINGLE_RANDOM = 0
    SINGLE_KNOWN = 1
    DUAL_RANDOM = 2
    DUAL_KNOWN = 3
    DUAL_IDENTICAL = 4

    def is_dual(self) -> bool:
        """True for the modes that seed two separate points."""
        return self.value > 1


def _default_interactions() -> List[List[int]]:
    # Predator grid: rows are 00, 01, 10, 11 against 00, 01, 10, 11.
    return [
        [0, -2, -2, -4],
        [2, 0, 0, -2],
        [2, 0, 0, -2],
        [4, 2, 2, 0],
    ]


def _zero_genome() -> List[int]:
    return [0] * MAX_GENOME_WORDS


@dataclass
class SimSettings:
    """Settings that cannot vary per cell and apply to the whole simulation."""

    grid_x: int = 100
    grid_y: Optional[int] = None
    environment_change_rate: int = 100
    max_difference: int = 3
    species_samples: int = 1
    species_sensitivity: int = 2
    time_slice_connect: int = 5
    pathogen_mode: PathogenMode = PathogenMode.DRIFT
    trophic_seed_mode: TrophicSeedMode = TrophicSeedMode.DEFAULT
    genome_size: int = 2
    reseed_mode: ReseedMode = ReseedMode.SINGLE_RANDOM
    environment_mode: EnvironmentMode = EnvironmentMode.LOOP
    a_priori_interaction: List[List[int]] = field(default_factory=_default_interactions)
    min_species_size: int = 0
    last_species_calculated: int = 0
    reseed_genome: List[int] = field(default_factory=_zero_genome)
    recalculate_fitness: bool = False
    nonspatial: bool = False
    toroidal: bool = False
    gui: bool = False
    species_logging: bool = False
    species_logging_to_file: bool = False
    fitness_logging_to_file: bool = False
    logging: bool = False
    predation_restriction: bool = False
    environment_interpolate: bool = True
    linkages_on: bool = False
    random_reseed_before_genetic: bool = True

    def __post_init__(self) -> None:
        if self.grid_y is None:
            self.grid_y = self.grid_x