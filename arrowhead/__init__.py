"""Settings, message and URI validation, and an INI reader for Arrowhead-style systems."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "inidict",
    "iniload",
    "iniparser",
    "validation",
]