import random

import pytest

from evosim.pathogens import PathogensSystem
from evosim.randoms import Randoms
from evosim.settings import PathogenMode
from evosim.system import bit_count


class _FixedRandoms:
    def __init__(self, r8=0, r32=0):
        self._r8 = r8
        self._r32 = r32

    def rand8(self):
        return self._r8

    def rand32(self):
        return self._r32


def _system(words="01", seed=1):
    system = PathogensSystem(
        grid_x=3, grid_y=2, depth=4, words_per_pathogen=4, rng=random.Random(seed)
    )
    system.set_genome_words_from_string(words, 4)
    return system


def _snapshot(system):
    return [[[list(p) for p in cell] for cell in col] for col in system.pathogens]


def test_shape_after_reset():
    system = _system()
    assert len(system.pathogens) == 3
    assert all(len(col) == 2 for col in system.pathogens)
    assert all(len(cell) == 4 for col in system.pathogens for cell in col)
    assert all(
        len(p) == 4 and all(0 <= w < 2**32 for w in p)
        for col in system.pathogens
        for cell in col
        for p in cell
    )


def test_reset_is_deterministic_with_seed():
    system = _system(seed=9)
    first = _snapshot(system)
    words = [w for col in first for cell in col for p in cell for w in p]
    assert len(set(words)) > 1

    system.reset()
    second = _snapshot(system)
    assert second != first

    fresh = _system(seed=9)
    assert _snapshot(fresh) == first


def test_probability_distribution():
    dist = _system("01").probability_distribution
    assert len(dist) == 64
    assert dist[0] == 4294967296 // 2
    assert all(a <= b for a, b in zip(dist, dist[1:]))
    assert dist[-1] < 2**32


def test_distribution_follows_word_count():
    system = _system("0")
    assert len(system.probability_distribution) == 32
    system.set_genome_words_from_string("012", 4)
    assert len(system.probability_distribution) == 96


def test_bad_word_string_raises_and_clears_distribution():
    system = _system("01")
    with pytest.raises(ValueError):
        system.set_genome_words_from_string("9", 4)
    assert system.probability_distribution == []


def test_will_die_depends_on_random_draw():
    system = _system("01")
    genome = [0, 0, 0, 0]
    assert system.will_die(genome, 0, 0, 0, _FixedRandoms(r32=0)) is False
    assert system.will_die(genome, 0, 0, 0, _FixedRandoms(r32=2**32 - 1)) is True


def test_will_die_false_without_words():
    system = PathogensSystem(grid_x=1, grid_y=1, depth=1, words_per_pathogen=2)
    assert system.will_die([0, 0], 0, 0, 0, _FixedRandoms(r32=2**32 - 1)) is False


def test_mutate_with_zero_chance_changes_nothing():
    system = _system()
    before = _snapshot(system)
    system.mutate(Randoms(seed=3), 0)
    assert system.pathogens == before


def test_mutate_flips_one_bit_in_first_slot_of_each_cell():
    system = _system("01")
    before = _snapshot(system)
    system.mutate(Randoms(seed=3), 256)
    for n in range(3):
        for m in range(2):
            first = sum(
                bit_count(a ^ b)
                for a, b in zip(system.pathogens[n][m][0], before[n][m][0])
            )
            assert first == 1
            assert system.pathogens[n][m][1:] == before[n][m][1:]


def test_replicate_copies_pathogen_into_target_cell():
    system = _system()
    source = list(system.pathogens[0][0][2])
    system.replicate(0, 0, 2, 1, 2, Randoms(seed=4), 0)
    target = system.pathogens[2][1]
    assert source in target
    copied = next(p for p in target if p == source)
    assert copied is not system.pathogens[0][0][2]


def test_colour_drift_extremes():
    system = _system("0")
    system.pathogens[0][0][0][0] = 0
    assert system.colour(0, 0, 0, PathogenMode.DRIFT) == (0, 0, 0)
    system.pathogens[0][0][0][0] = 0xFFFFFFFF
    assert system.colour(0, 0, 0, PathogenMode.DRIFT) == (250, 253, 253)


def test_colour_evolve_uses_modal_word():
    system = _system("0")
    cell = system.pathogens[1][1]
    cell[0][0] = 0xFFFFFFFF
    for p in cell[1:]:
        p[0] = 0
    assert system.colour(1, 1, 0, PathogenMode.EVOLVE) == (0, 0, 0)
    assert system.colour(1, 1, 0, PathogenMode.DRIFT) == (250, 253, 253)


def test_colour_clamps_word_index():
    system = _system("01")
    assert system.colour(0, 1, 9, PathogenMode.DRIFT) == system.colour(
        0, 1, 1, PathogenMode.DRIFT
    )