import sys

from loguru import logger

LEVELS = ["WARNING", "INFO", "DEBUG"]


def configure_logging(verbosity: int = 0) -> None:
    """Send asciigrid diagnostics to stderr, more of them the higher the verbosity."""
    level = LEVELS[min(max(verbosity, 0), len(LEVELS) - 1)]
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {message}")
    logger.enable("asciigrid")
