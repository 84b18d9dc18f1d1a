"""A full-screen checkers prototype: main menu, settings screen and game board."""

__version__ = "0.1.0"