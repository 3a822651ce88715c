"""Classic beginner programming exercises as small, reusable Python functions and classes."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "calculator",
    "cli",
    "files",
    "matrices",
    "numbers",
    "strings",
    "structures",
    "students",
]