"""
session_log.py

Collects the transcript of one game and writes it to its own file.

Nothing touches the disk until flush(), which happens once when the game
ends. Each file is named after the time the session ended:

    session-YYYYMMDD-HHMMSS.txt

and holds one "<guess> | <outcome>" line per guess.
"""

import logging
from datetime import datetime
from pathlib import Path

from lucky_vault.errors import ValidationError


logger = logging.getLogger(__name__)

LOG_FILE_PREFIX = "session-"
LOG_FILE_EXTENSION = ".txt"
TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
SEPARATOR = " | "


class SessionLog:
    def __init__(self, directory, clock=datetime.now):
        if directory is None:
            raise ValidationError("Log directory path cannot be None.")

        self.directory = Path(directory)
        self._clock = clock
        self._records: list[tuple[str, str]] = []

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ValidationError(
                f"Failed to create log directory: {self.directory}"
            ) from exc

    def append(self, guess_text: str, outcome_tag: str) -> None:
        if outcome_tag is None:
            raise ValidationError("Log outcome cannot be None.")
        self._records.append(("" if guess_text is None else guess_text, outcome_tag))

    @property
    def records(self) -> list[tuple[str, str]]:
        return list(self._records)

    def __len__(self):
        return len(self._records)

    def render(self) -> str:
        return "".join(
            f"{guess}{SEPARATOR}{outcome}\n" for guess, outcome in self._records
        )

    def _destination(self) -> Path:
        stem = LOG_FILE_PREFIX + self._clock().strftime(TIMESTAMP_FORMAT)
        path = self.directory / f"{stem}{LOG_FILE_EXTENSION}"

        # Two sessions ending in the same second must not share a file
        suffix = 1
        while path.exists():
            path = self.directory / f"{stem}-{suffix}{LOG_FILE_EXTENSION}"
            suffix += 1
        return path

    def flush(self) -> Path:
        """Write every buffered record to a new file and return its path."""
        content = self.render()
        if not content.strip():
            raise ValidationError("Log content cannot be blank or whitespace-only.")

        path = self._destination()
        try:
            with open(path, "x", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as exc:
            raise ValidationError(f"Failed to write log entry: {path}") from exc

        logger.info("Wrote %d log records to %s", len(self._records), path)
        return path
