"""Building blocks for an individual-based evolutionary simulation: genome systems, pathogens, species identification, reseed genomes and run options."""

__version__ = "3.0.1"