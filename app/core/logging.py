import logging
from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> None:
    """
    Configure root logging from settings.LOG_LEVEL.
    Called once on application startup.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(level)}")
