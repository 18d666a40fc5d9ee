"""Core of a small shell: builtins, environment, command-line evaluation and text helpers."""

__version__ = "0.1.0"

__all__ = ["__version__"]