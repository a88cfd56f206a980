"""Small solutions to classic coding puzzles on strings, arrays and simulations."""

__version__ = "0.1.0"