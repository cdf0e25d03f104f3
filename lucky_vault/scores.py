"""
scores.py

Stores the best score: the fewest attempts ever needed to win.

The record is a UTF-8 text file holding one decimal integer. A record that
has never seen a win holds UNSET_MARKER, which is read back as None and is
never reported as a real score.
"""

import logging
from pathlib import Path
from typing import Optional

from lucky_vault.errors import ValidationError


logger = logging.getLogger(__name__)

# Largest 32-bit signed integer, kept so older score files stay readable
UNSET_MARKER = 2**31 - 1


class ScoreStore:
    def __init__(self, path):
        if path is None:
            raise ValidationError("High score file path cannot be None.")
        self.path = Path(path)

    @classmethod
    def load_or_init(cls, path) -> "ScoreStore":
        """
        Open the score record at path, creating it if it does not exist.

        A new record holds the unset marker, so read() never has to deal
        with a missing file.
        """
        store = cls(path)
        if not store.path.exists():
            try:
                store.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ValidationError(
                    f"Failed to create high score directory: {store.path.parent}"
                ) from exc
            store.write(None)
            logger.info("Initialised empty high score record at %s", store.path)
        return store

    def read(self) -> Optional[int]:
        """Return the best attempt count, or None if nobody has won yet."""
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ValidationError(
                f"Failed to read high score file: {self.path}"
            ) from exc

        lines = text.splitlines()
        if not lines or not lines[0].strip():
            raise ValidationError("High score file is empty or contains a blank line.")

        first = lines[0].strip()
        # int() alone would accept "+3", "1_0" and full-width digits
        if not (first.isascii() and first.isdigit()):
            raise ValidationError(
                f"High score file contains a non-numeric value: {first}"
            )
        value = int(first)

        if value == UNSET_MARKER:
            return None
        if value < 1:
            raise ValidationError(f"High score must be at least 1, got {value}.")
        return value

    def write(self, score: Optional[int]) -> None:
        """Overwrite the record with score; None stores the unset marker."""
        if score is not None and score < 1:
            raise ValidationError(f"High score must be at least 1, got {score}.")

        value = UNSET_MARKER if score is None else score
        try:
            self.path.write_text(f"{value}\n", encoding="utf-8")
        except OSError as exc:
            raise ValidationError(f"Failed to write high score: {self.path}") from exc
