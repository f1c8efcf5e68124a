"""Random release-name suggestions harvested from web pages."""

__version__ = "1.0.0"
