import sys

from loguru import logger


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[category]}</cyan> - "
    "<level>{message}</level>"
)

# Silent as a library; setup_logging() turns it back on.
logger.disable("Tree_Hash")


def setup_logging(level: str = "WARNING", sink=None) -> None:
    """
    Replace loguru's default sink with a single stderr sink.

    stdout stays reserved for hashes.
    """
    logger.remove()
    logger.enable("Tree_Hash")
    logger.configure(extra={"category": "-"})
    logger.add(
        sink or sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is None and sys.stderr.isatty(),
    )


def log(level: str, category: str, message: str) -> None:
    logger.bind(category=category).log(level.upper(), message)
