"""Restaurant finder on a scrolling city map: geometry, record storage, sorting and a pygame viewer."""

__version__ = "0.1.0"