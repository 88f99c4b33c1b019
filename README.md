# evosim

Building blocks for an individual-based evolutionary simulation in which
digital organisms carry genomes made of 32-bit words. Each part of the model
(mutation, pathogens, species identification) works on a chosen subset of the
genome words. The package supplies those parts together with the run
settings, a buffered random-number source, reseed-genome parsing and the
command-line options of a simulation run.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `evosim` command parses the options of a simulation run and prints every
option that was given as one `key=value` line. Each option is reported under
its first name, so `--gridx` is printed as `x` and `--toroidal` as `t`.

```
evosim --help
evosim --gridx 100 --gridy 100 --toroidal on --mutation 10
```

The second command prints:

```
x=100
y=100
t=1
u=10
```

Single-letter options take one dash (`-x 100`); longer names accept one or
two dashes (`-gridx 100` or `--gridx 100`). On/Off options accept `on`,
`off`, `yes`, `no`, `y`, `n`, `true`, `false`, `1` and `0` in any case and are
printed as `1` or `0`; an unrecognised value counts as on. An unknown option
or a missing value ends the command with a usage error.

## Library overview

| Module | What it provides |
| --- | --- |
| `evosim.settings` | `SimSettings` with the run defaults, and the `EnvironmentMode`, `PathogenMode`, `TrophicSeedMode` and `ReseedMode` enums |
| `evosim.randoms` | `Randoms`, a buffered source of 8, 16, 32 and 64 bit random numbers, optionally seeded |
| `evosim.system` | `GenomeSystem`, the base for anything that reads chosen genome words, plus `bit_count`, `genome_string` and `number_for_char` |
| `evosim.mutation` | `MutationSystem`, which flips one random bit in one word in use |
| `evosim.pathogens` | `PathogensSystem`, a grid of pathogen genomes that can kill organisms, drift, replicate and be shown as colours |
| `evosim.speciesid` | `SpeciesIDSystem`, plain and masked bit counts and breeding compatibility |
| `evosim.genomes` | `SortableGenome`, `SpeciesBinEntry` and `sort_by_count` |
| `evosim.reseed` | validating and converting binary and hex genome strings for reseeding, with `GenomeFormatError` |
| `evosim.options` | `OptionSpec`, `bool_value` and `build_parser` for the run options |
| `evosim.cli` | `parse_options` and the `main` entry point |

### Choosing genome words

Systems name the words they use with a short string: `"01"` means words 0
and 1, and letters continue after 9 (`"A"` is word 10). A word outside the
allowed range raises `ValueError`.

```python
from evosim.system import GenomeSystem, genome_string

system = GenomeSystem("Example system")
system.set_genome_words_from_string("01", 16)
print(system.words_in_use_string())           # 01
print(genome_string([5, 0], 2))               # 64 binary digits
```

### Mutation and species comparison

```python
from evosim.mutation import MutationSystem
from evosim.randoms import Randoms
from evosim.speciesid import SpeciesIDSystem

randoms = Randoms(seed=1)
mutation = MutationSystem()
mutation.set_genome_words_from_string("01", 2)
genome = [0, 0]
mutation.mutate(genome, randoms)              # exactly one bit is now set

species = SpeciesIDSystem()
species.set_genome_words_from_string("01", 2)
print(species.is_compatible(genome, [0, 0], 3))   # True
```

### Reseed genomes

```python
from evosim.reseed import binary_to_hex, hex_to_binary, parse_reseed_genome

hex_text = binary_to_hex("1" * 32)             # "FFFFFFFF"
binary_text = hex_to_binary(hex_text)
genome = parse_reseed_genome("FFFFFFFF00000000", True, 2)   # [4294967295, 0]
```

Malformed genome strings, or ones of the wrong length, raise
`GenomeFormatError`.

## What this package does not do

There is no simulation loop here: no grid of organisms, no breeding,
settling or fitness calculation, no environment images, no logging and no
graphical window. The `evosim` command only parses and prints run options; it
does not start a run.