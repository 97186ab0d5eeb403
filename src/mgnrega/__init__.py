"""MGNREGA district performance resolver."""

__version__ = "0.1.0"
