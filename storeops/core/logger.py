import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("storeops")


def configure_logging(level: str = "INFO") -> None:
    """Send storeops logs to stdout; safe to call more than once."""
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    return logger.getChild(name)
