"""Environment-driven settings, optionally loaded from a `.env` file."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./promptmaster.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
# Number of consecutive ports tried by `serve` before giving up.
PORT_ATTEMPTS = int(os.getenv("PORT_ATTEMPTS", "10"))

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
