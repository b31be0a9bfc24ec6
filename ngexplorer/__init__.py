"""A Tk file explorer with file search by name, extension and content."""

__version__ = "2.0.0a0"

__all__ = ["__version__"]