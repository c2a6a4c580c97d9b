import sys
from loguru import logger

def configure_logging(level: str = "INFO") -> int:
    """Replace loguru's default sink with a single stderr sink at `level`. Returns the sink id."""
    logger.remove()
    return logger.add(sys.stderr, level=level.upper())
