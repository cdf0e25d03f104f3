"""
game.py

The guessing game itself: one GameSession per run.

A session picks a secret country, then reads guesses until the player
either finds the secret (WON) or types the quit command (QUIT):

    empty guess         -> "empty",          costs nothing
    quit command        -> "quit",           costs nothing, ends the game
    wrong length        -> "wrong_length",   costs one attempt
    the secret          -> "CORRECT in N",   costs one attempt, ends the game
    anything else       -> "matches=K",      costs one attempt

Console input, console output and randomness are passed in, so a session
can be driven entirely by scripted input in tests.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from lucky_vault.config import QUIT_COMMAND


logger = logging.getLogger(__name__)

PROMPT = "Your guess: "
NO_BEST = "—"


class GameState(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    QUIT = "quit"


@dataclass
class GameResult:
    state: GameState
    attempts: int
    secret: str
    new_best: bool


def _codepoints(text: str) -> np.ndarray:
    return np.frombuffer(text.encode("utf-32-le"), dtype=np.uint32)


def count_matches(secret: str, guess: str) -> int:
    """
    Count the positions where secret and guess hold the same letter,
    ignoring case. Both words are expected to have the same length.
    """
    a = _codepoints(secret.lower())
    b = _codepoints(guess.lower())
    n = min(a.size, b.size)
    return int(np.count_nonzero(a[:n] == b[:n]))


class GameSession:
    def __init__(
        self,
        words,
        scores,
        log,
        read_line=input,
        emit=print,
        rng=None,
        quit_command: str = QUIT_COMMAND,
    ):
        self.words = words
        self.scores = scores
        self.log = log
        self.read_line = read_line
        self.emit = emit
        self.rng = rng if rng is not None else random.Random()
        self.quit_command = quit_command

        self.secret: Optional[str] = None
        self.attempts = 0
        self.best: Optional[int] = None
        self.new_best = False
        self.state = GameState.AWAITING_GUESS

    @property
    def secret_length(self) -> int:
        return len(self.secret)

    @property
    def finished(self) -> bool:
        return self.state is not GameState.AWAITING_GUESS

    def _print_header(self):
        self.emit(f"LUCKY VAULT - COUNTRY MODE. Type {self.quit_command} to exit.")
        self.emit(f"Secret word length: {self.secret_length}")
        if self.best is None:
            self.emit(f"Current best: {NO_BEST}")
        else:
            self.emit(f"Current best: {self.best} attempts")

    def begin(self, secret: Optional[str] = None):
        """Choose the secret (unless one is given) and show the header."""
        self.secret = secret if secret is not None else self.words.pick_random(self.rng)
        self.best = self.scores.read()
        self.attempts = 0
        self.new_best = False
        self.state = GameState.AWAITING_GUESS
        logger.info("New game, secret has %d letters", self.secret_length)
        self._print_header()

    def submit(self, raw: str) -> str:
        """Evaluate one line of input and return its outcome tag."""
        guess = raw.strip()

        if not guess:
            self.emit("Empty guess. Try again.")
            return self._record(guess, "empty")

        if guess.lower() == self.quit_command.lower():
            self.emit("Bye!")
            self.state = GameState.QUIT
            return self._record(guess, "quit")

        # Every guess past this point costs an attempt, wrong length included
        self.attempts += 1

        if len(guess) != self.secret_length:
            self.emit(f"Wrong length ({len(guess)}). Need {self.secret_length}.")
            return self._record(guess, "wrong_length")

        if guess.lower() == self.secret.lower():
            self.emit(
                f"Correct in {self.attempts} attempts! Word was: {self.secret}"
            )
            outcome = self._record(guess, f"CORRECT in {self.attempts}")
            if self.best is None or self.attempts < self.best:
                self.emit("NEW BEST for COUNTRY mode!")
                self.scores.write(self.attempts)
                self.new_best = True
                logger.info("High score updated to %d", self.attempts)
            self.state = GameState.WON
            return outcome

        matches = count_matches(self.secret, guess)
        self.emit(f"Not it. {matches} letter(s) correct (right position).")
        return self._record(guess, f"matches={matches}")

    def _record(self, guess: str, outcome: str) -> str:
        self.log.append(guess, outcome)
        return outcome

    def _next_line(self) -> str:
        try:
            return self.read_line(PROMPT)
        except EOFError:
            # Closed input ends the game like the quit command
            return self.quit_command

    def start(self, secret: Optional[str] = None) -> GameResult:
        """Play one full game and write its transcript."""
        self.begin(secret)
        while not self.finished:
            self.submit(self._next_line())
        self.log.flush()
        return GameResult(self.state, self.attempts, self.secret, self.new_best)
