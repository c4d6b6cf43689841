import sys
from typing import Optional
from loguru import logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None, rotation: str = "1 MB") -> None:
    """Replace loguru's default stderr sink and optionally log to a rotating file."""
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, rotation=rotation, level="DEBUG")
