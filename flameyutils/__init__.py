"""Helpers for prompting, range-bounded list statistics, randomisation, case conversion and sorting."""

__version__ = "0.2.2"
__all__ = ["demo", "prompts", "randomness", "ranges", "sorting", "stats", "text"]