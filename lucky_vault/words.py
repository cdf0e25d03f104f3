"""
words.py

Handles loading and validating the country word list.
Every line of the file is one candidate secret; a blank line means the
file is broken, not that the line should be skipped.
"""

import logging
from pathlib import Path

from lucky_vault.errors import ValidationError


logger = logging.getLogger(__name__)


def read_word_lines(path) -> list[str]:
    """Read a newline-separated word list, keeping every line as written."""
    if path is None:
        raise ValidationError("Word list path cannot be None.")

    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Failed to read word list: {path}") from exc

    return text.splitlines()


class WordStore:
    """
    The candidate secret words, loaded once and never modified.

    Every word is non-blank and the store is never empty, so a random pick
    is always defined.
    """

    def __init__(self, words):
        self._words = tuple(words)

    @classmethod
    def from_lines(cls, lines) -> "WordStore":
        if lines is None:
            raise ValidationError("Word list has no entries.")

        lines = list(lines)
        if not lines:
            raise ValidationError("Word list has no entries.")

        for number, line in enumerate(lines, start=1):
            if line is None:
                raise ValidationError(f"Word list line {number} is missing.")
            if not line.strip():
                raise ValidationError(
                    f"Word list line {number} is blank or whitespace-only."
                )

        return cls(lines)

    @classmethod
    def load(cls, path) -> "WordStore":
        store = cls.from_lines(read_word_lines(path))
        logger.info("Loaded %d words from %s", len(store), path)
        return store

    def all(self) -> list[str]:
        """Return a fresh copy of the words; changing it leaves the store alone."""
        return list(self._words)

    def pick_random(self, rng) -> str:
        """Uniformly pick one word using rng.randrange."""
        return self._words[rng.randrange(len(self._words))]

    def __len__(self):
        return len(self._words)

    def __getitem__(self, index):
        return self._words[index]
