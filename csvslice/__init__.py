"""Extract row ranges or named columns from CSV files, as a library and a command."""

__version__ = "0.1.0"
__all__ = ["cli", "core", "errors"]