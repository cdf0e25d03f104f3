"""
main.py

Plays one game of Lucky Vault in the console.

Options:
-countries PATH: word list, one country per line.
-highscore PATH: best-score record (created on first run).
-log-dir PATH: directory receiving one transcript file per session.
-seed N: seed the secret picker, for repeatable games.
-verbose: log which files are read and written.
"""

import argparse
import logging
import random
from pathlib import Path

from lucky_vault.config import GameConfig, COUNTRIES_PATH, HIGH_SCORE_PATH, LOG_DIR
from lucky_vault.errors import ValidationError
from lucky_vault.game import GameSession
from lucky_vault.scores import ScoreStore
from lucky_vault.session_log import SessionLog
from lucky_vault.words import WordStore


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Guess the secret country in as few attempts as you can."
    )
    parser.add_argument(
        "-countries",
        type=Path,
        default=COUNTRIES_PATH,
        help=f"Word list file (default: {COUNTRIES_PATH}).",
    )
    parser.add_argument(
        "-highscore",
        type=Path,
        default=HIGH_SCORE_PATH,
        help=f"High score file (default: {HIGH_SCORE_PATH}).",
    )
    parser.add_argument(
        "-log-dir",
        type=Path,
        default=LOG_DIR,
        help=f"Directory for session transcripts (default: {LOG_DIR}).",
    )
    parser.add_argument(
        "-seed",
        type=int,
        default=None,
        help="Seed for picking the secret word.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Log file activity to stderr.",
    )
    return parser.parse_args(argv)


def build_session(config: GameConfig) -> GameSession:
    words = WordStore.load(config.countries_path)
    scores = ScoreStore.load_or_init(config.high_score_path)
    log = SessionLog(config.log_dir)
    return GameSession(
        words,
        scores,
        log,
        rng=random.Random(config.seed),
        quit_command=config.quit_command,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(name)s: %(message)s",
    )

    config = GameConfig(
        countries_path=args.countries,
        high_score_path=args.highscore,
        log_dir=args.log_dir,
        seed=args.seed,
    )

    try:
        build_session(config).start()
    except ValidationError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
