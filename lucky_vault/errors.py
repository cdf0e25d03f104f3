"""
errors.py

The one error type raised by the game for bad data files, bad arguments
and failed reads or writes.
"""


class ValidationError(ValueError):
    """Raised when a word list, score record or session log is unusable."""
