"""Configuration constants for the evolutio package."""

import logging
import os
from typing import Dict

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.4.0"

# Classical Prisoner's Dilemma payoffs (T > R > P > S, 2R > T + S)
DEFAULT_PAYOFF: Dict[str, int] = {"t": 5, "r": 3, "p": 1, "s": 0}

# Simulation defaults - configurable via environment variables
DEFAULT_ROUNDS = int(os.environ.get("EVOLUTIO_DEFAULT_ROUNDS", "10"))
DEFAULT_NOISE = float(os.environ.get("EVOLUTIO_DEFAULT_NOISE", "0.0"))
DEFAULT_GENERATIONS = int(os.environ.get("EVOLUTIO_DEFAULT_GENERATIONS", "50"))
# Count per roster slot when the caller's population vector is unusable
DEFAULT_POPULATION = int(os.environ.get("EVOLUTIO_DEFAULT_POPULATION", "5"))

# Front-end limits
MAX_ROUNDS = int(os.environ.get("EVOLUTIO_MAX_ROUNDS", "1000"))
MAX_NOISE = 0.5

# Raise on fallback cases instead of substituting defaults
STRICT_MODE = os.environ.get("EVOLUTIO_STRICT", "false").lower() == "true"

LOG_LEVEL = os.environ.get("EVOLUTIO_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str = None) -> None:
    """Configure root logging for interactive front ends.

    Args:
        level: Log level name (defaults to EVOLUTIO_LOG_LEVEL).
    """
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level)
