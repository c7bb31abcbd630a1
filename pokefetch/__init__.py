"""Interactive shell and client for Pokemon location areas from the PokeAPI."""

__version__ = "0.1.0"
__all__ = ["__version__"]