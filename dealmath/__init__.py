"""Financial calculation engine for real estate deal analysis."""

__version__ = "0.1.0"
