"""A branching text adventure played through a binary decision tree of story events."""

__version__ = "0.1.0"
__all__ = ["__version__"]