"""Chesslet: a small chess rules core with a difficulty-scaled minimax AI."""

__version__ = "0.1.0"
