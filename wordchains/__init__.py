"""wordchains: find word-ladder chains between two equal-length words."""

__version__ = "0.1.0"
