"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv


def _int_env(name: str, default: int) -> int:
    """Read an integer setting, keeping the default when it is not a number."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Logging
LOG_LEVEL = os.getenv("HERO_PNL_LOG_LEVEL", "WARNING").upper()

# Display
CURRENCY_SYMBOL = os.getenv("HERO_PNL_CURRENCY_SYMBOL", "$")
DECIMALS = _int_env("HERO_PNL_DECIMALS", 2)
