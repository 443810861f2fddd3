"""English draughts rules engine with an alpha-beta opponent."""

__version__ = "0.1.0"
