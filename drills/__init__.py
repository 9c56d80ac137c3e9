"""Small classic programming exercises: numbers, arrays, matrices, strings, a calculator and a command-line tool."""

__version__ = "0.1.0"
__all__ = ["numbers", "calculator", "arrays", "matrices", "strings", "cli"]