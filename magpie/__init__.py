"""Core pieces of a crossword board game engine: constants, PRNG, thread control, win percentages, move formatting, formed words and go-command parsing."""

__version__ = "0.1.0"