"""Classic programming puzzles with small, readable solutions."""

__version__ = "0.1.0"

__all__ = [
    "calculator",
    "geometry",
    "hashtable",
    "matrices",
    "moderate",
    "nodes",
    "numbers",
    "sequences",
    "strings",
    "tail",
    "words",
]