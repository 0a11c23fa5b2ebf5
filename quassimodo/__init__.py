"""Rule errors, board pieces, resource settings and command-line options for a barrier board game."""

__version__ = "0.1.0"