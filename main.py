"""
main.py — Driving Theory Coach server entry point
"""

import logging
import sys

from config import DEFAULT_HOST, DEFAULT_PORT, LOG_FILE, LOG_LEVEL

# ── Logging ──────────────────────────────────────────────────────────────────
try:
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[
            logging.FileHandler(LOG_FILE, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )
except PermissionError:
    # Log file locked: console only
    logging.basicConfig(level=LOG_LEVEL)

logger = logging.getLogger(__name__)


def main() -> None:
    import uvicorn
    from api.app import create_app

    logger.info("=== Driving Theory Coach started ===")
    app = create_app()
    logger.info(f"Serving on http://{DEFAULT_HOST}:{DEFAULT_PORT}")
    try:
        uvicorn.run(app, host=DEFAULT_HOST, port=DEFAULT_PORT, log_level="warning")
    except KeyboardInterrupt:
        logger.info("Stopped by user.")


if __name__ == "__main__":
    main()
