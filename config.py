import logging
import os

# Base directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Logging
LOG_FILE = os.getenv("LOG_FILE", os.path.join(BASE_DIR, "launch.log"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Server
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))

# Learner shown on exam results until a client sets one
DEFAULT_LEARNER_ID = os.getenv("DEFAULT_LEARNER_ID", "")

# Countdown tick length in seconds (1 second in normal use)
TICK_INTERVAL = 1.0


def random_seed() -> int | None:
    """RANDOM_SEED env var as int, or None (unseeded)."""
    raw = os.getenv("RANDOM_SEED")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring invalid RANDOM_SEED: {raw!r}")
        return None
