"""Small maths, parsing, puzzle and rendering tools."""

__version__ = "0.1.0"