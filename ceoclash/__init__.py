"""A two-player side-view brawler and the vector, rectangle, colour, text and stream helpers it uses."""

__version__ = "0.1.0"