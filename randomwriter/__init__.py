"""Character-level Markov text generator."""

__version__ = "1.0.0"
