"""Console system for managing employee accounts and recording salary payments."""

__version__ = "0.1.0"
__all__ = ["__version__"]