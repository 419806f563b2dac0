"""Interactive console car assembler with part catalogs and combination checks."""

__version__ = "0.1.0"
__all__ = ["parts", "producer", "view", "cli"]