"""
config.py

Default locations of the game's data files and the knobs main.py exposes.
"""

import os
from dataclasses import dataclass
from pathlib import Path


# Data lives next to the source tree unless LUCKY_VAULT_DATA_DIR says otherwise
DATA_DIR = Path(
    os.environ.get(
        "LUCKY_VAULT_DATA_DIR",
        Path(__file__).resolve().parent.parent / "data",
    )
)
COUNTRIES_PATH = DATA_DIR / "countries.txt"
HIGH_SCORE_PATH = DATA_DIR / "highscore.txt"
LOG_DIR = DATA_DIR / "logs"

QUIT_COMMAND = "QUIT"


@dataclass(frozen=True)
class GameConfig:
    countries_path: Path = COUNTRIES_PATH
    high_score_path: Path = HIGH_SCORE_PATH
    log_dir: Path = LOG_DIR
    quit_command: str = QUIT_COMMAND
    seed: int | None = None
