"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Table
STACK_SIZE = 100
SMALL_BLIND = 1
BIG_BLIND = 2

# Training
DEFAULT_TRAINING_COUNT = int(os.getenv("POKER_TRAINING_COUNT", "10"))
_seed = os.getenv("POKER_TRAINER_SEED", "")
DEFAULT_SEED = int(_seed) if _seed else None

# Logging
LOG_LEVEL = os.getenv("POKER_LOG_LEVEL", "WARNING").upper()
