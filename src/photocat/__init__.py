"""Browse and edit a small JSON photo catalog from the terminal."""

__version__ = "0.1.0"
