"""Command-line option table and the parser built from it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Tuple

_TRUE_WORDS = frozenset({"on", "1", "y", "yes", "true"})
_FALSE_WORDS = frozenset({"off", "0", "n", "no", "false"})

DESCRIPTION = (
    "An individual-based evolutionary model. You are using the command line "
    "option. See the documentation for a description of the software."
)


def bool_value(value: str) -> str:
    """Normalise an on/off word to "1" or "0"; anything unrecognised counts as on."""
    word = value.lower()
    if word in _FALSE_WORDS:
        return "0"
    return "1"


@dataclass(frozen=True)
class OptionSpec:
    """One command-line option: its names, the key it is stored under, and its help."""

    names: Tuple[str, ...]
    key: str
    help: str
    value_name: str
    boolean: bool = False


def _opt(names, help_text, value_name, key=None, boolean=False) -> OptionSpec:
    names = tuple(names)
    return OptionSpec(names, key or names[0], help_text, value_name, boolean)


_ON_OFF = "On/Off"
_MODES = "mode (Static|Once|Loop|Bounce)"

OPTIONS: Tuple[OptionSpec, ...] = (
    _opt(("a", "startage"), "Starting age for organisms.", "age (integer)"),
    _opt(("b", "breedthreshold"), "Breed threshold.", "threshold (integer)"),
    _opt(("c", "breedcost"), "Breed cost.", "cost (integer)"),
    _opt(("d", "maxdifftobreed"), "Maximum difference to breed.", "maxdifftobreed (integer)"),
    _opt(("e", "environment"), "Directory containing environment images.", "directory"),
    _opt(("f", "usemaxdifftobreed"), "Use maximum difference to breed criterion", _ON_OFF, boolean=True),
    _opt(("g", "breedwithinspecies"), "Only allow breeding within a species", _ON_OFF, boolean=True),
    _opt(("i", "disperal"), "maximum dispersal distance.", "distance (integer)"),
    _opt(("j", "outputpath"), "path for output logs.", "path"),
    _opt(("k", "logtype"), "logs to generate.", "Phylogeny/Normal/Both"),
    _opt(("l", "excludenodescendents"), "Exclude species without descendents from phylogeny logs", _ON_OFF, boolean=True),
    _opt(("m", "environmentmode"), "Environment file cycling mode.", _MODES),
    _opt(("n", "energy"), "Energy input.", "energy (integer)"),
    _opt(("o", "tolerance"), "Settle tolerance.", "Settle tolerance (integer)"),
    _opt(("p", "phylogeny"), "Phylogeny logging mode.", "Off|Basic|Phylogeny|Metrics"),
    _opt(("q", "recalcfitness"), "recalculate fitness each iteration.", _ON_OFF, boolean=True),
    _opt(("r", "refreshrate"), "environment refresh rate.", "rate (integer)"),
    _opt(("s", "slots"), "Slots per pixel.", "slots (integer)"),
    _opt(("t", "toroidal"), "Toroidal environment", _ON_OFF, boolean=True),
    _opt(("u", "mutation"), "Chance of mutation (0-255).", "chance (integer)"),
    _opt(("v", "csv"), "Use CSV format for normal log.", _ON_OFF, boolean=True),
    _opt(("w", "interpolate"), "Interpolate environmental images", _ON_OFF, boolean=True),
    _opt(("x", "gridx"), "Grid (image) size, x.", "size (integer)"),
    _opt(("y", "gridy"), "Grid (image) size, y.", "size (integer)"),
    _opt(("z", "genomesize"), "Number of words in genome.", "size (integer)"),
    _opt(("polling",), "Set polling rate for logging and screen refresh.", "rate [integer]"),
    _opt(("auto",), "Automatically start simulation and exit program after completion of specified number of iterations", "iterations [integer]"),
    _opt(("nonspatial",), "Use non-spatial simulation mode.", _ON_OFF, boolean=True),
    _opt(("minspeciessize",), "Minimum species size to appear in logs", "size [integer]"),
    _opt(("fitnesstarget",), "Fitness Target", "target [integer]"),
    _opt(("breed",), "Breeding mode", "Obligate/Facultative/Variable/Asexual"),
    _opt(("variablemutate",), "Variable mutation rates", _ON_OFF, boolean=True),
    _opt(("nogui",), "Don't update GUI", _ON_OFF, boolean=True),
    _opt(("pathogens",), "Turn pathogens on or off", _ON_OFF, boolean=True),
    _opt(("pathogenmutate",), "Chance of mutation (0-255).", "chance (integer)"),
    _opt(("pathogenfrequency",), "Frequency pathogens are applied.", "frequency (integer)"),
    _opt(("pathogenevolve",), "Set pathogens to evolve (on or off) - default is drift", _ON_OFF, boolean=True),
    _opt(("customlogging",), "Record all custom logs.", _ON_OFF, boolean=True),
    _opt(("disparityLogging",), "Record disparity log.", _ON_OFF, boolean=True),
    _opt(("interactblocks",), "Turn block interactions on/off.", _ON_OFF, boolean=True),
    _opt(("multibreedlist",), "Turn multiple breed lists on/off.", _ON_OFF, boolean=True),
    _opt(("interactrate",), "Frequency at which interactions occur.", "frequency (integer)"),
    _opt(("minpredatorscore",), "Minimum predator score required for direct energy theft.", "threshold (integer)"),
    _opt(("predationefficiency",), "Trophic efficiency of direct energy theft predation.", "integer"),
    _opt(("log", "logFile"), "XML File containing the log outputs.", "file", key="opt_log"),
    _opt(("v2log",), "Initiates v2.0.0 logging style.", _ON_OFF, boolean=True),
    _opt(("interactfitness",), "Interactions modify fitness.", _ON_OFF, boolean=True),
    _opt(("interactenergy",), "Interactions modify energy.", _ON_OFF, boolean=True),
    _opt(("li_population",), "Log images for population", _ON_OFF, boolean=True),
    _opt(("li_fitness",), "Log images for mean fitness", _ON_OFF, boolean=True),
    _opt(("li_sys_visualisation",), "Log images for visualisation system 1", _ON_OFF, key="li_coding", boolean=True),
    _opt(("li_sys_visualisation2",), "Log images for visualisation system 2", _ON_OFF, key="li_noncoding", boolean=True),
    _opt(("li_species",), "Log images for species", _ON_OFF, boolean=True),
    _opt(("li_settles",), "Log images for settles", _ON_OFF, boolean=True),
    _opt(("li_fails",), "Log images for breed/settle fails", _ON_OFF, boolean=True),
    _opt(("li_environment",), "Log images for environenment", _ON_OFF, boolean=True),
    _opt(("sys_fitness",), "Fitness system", "Word string"),
    _opt(("sys_breed",), "Breed system", "Word string"),
    _opt(("sys_mutate",), "Mutate system", "Word string"),
    _opt(("sys_var_mutate",), "Variable mutate system", "Word string"),
    _opt(("sys_var_breed",), "Variable breed system", "Word string"),
    _opt(("sys_pathogens",), "Pathogens system", "Word string"),
    _opt(("sys_species_ID",), "Species ID system", "Word string"),
    _opt(("sys_interactions",), "Interactions system", "Word string"),
    _opt(("sys_visualisation",), "Visualisation system", "Word string"),
    _opt(("sys_visualisation2",), "visualisation2 system", "Word string"),
    _opt(("settings",), "Load a settings file.", "file"),
    _opt(("maxthreads",), "Specify maximum threads to use", "thread count (integer)"),
    _opt(("L1_variable",), "Variable to be linked (required).", "variable"),
    _opt(("L1_imageSequence",), "Directory containing linkage mask images (required).", "directory"),
    _opt(("L1_mode",), "Image file cycling mode (defaults to static).", _MODES),
    _opt(("L1_interpolate",), "Image interpolation (defaults to true).", _ON_OFF, boolean=True),
    _opt(("L1_change_rate",), "Image refresh rate (defaults to 100).", "rate (integer)"),
    _opt(("L2_variable",), "Second variable to be linked (required).", "variable"),
    _opt(("L2_imageSequence",), "Directory containing second linkage mask images (required).", "directory"),
    _opt(("L2_mode",), "Image file cycling mode (defaults to static).", _MODES),
    _opt(("L2_interpolate",), "Image interpolation (defaults to true).", _ON_OFF, boolean=True),
    _opt(("L2_change_rate",), "Image refresh rate (defaults to 100).", "rate (integer)"),
)


def _flags(spec: OptionSpec) -> List[str]:
    # Single-letter names take one dash; longer names accept one or two dashes.
    flags: List[str] = []
    for name in spec.names:
        if len(name) == 1:
            flags.append(f"-{name}")
        else:
            flags.extend((f"--{name}", f"-{name}"))
    return flags


def build_parser() -> argparse.ArgumentParser:
    """Parser whose namespace holds each given option under its key, unset ones as None."""
    parser = argparse.ArgumentParser(description=DESCRIPTION, allow_abbrev=False)
    for spec in OPTIONS:
        parser.add_argument(
            *_flags(spec),
            dest=spec.key,
            metavar=spec.value_name,
            help=spec.help,
            type=bool_value if spec.boolean else str,
            default=None,
        )
    return parser