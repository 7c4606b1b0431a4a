"""Create directory scaffolds from markdown outlines."""

__version__ = "1.0.0"
