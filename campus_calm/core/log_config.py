import logging
from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str | None = None) -> None:
    lvl = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger("campus_calm").setLevel(lvl)
    # request lines from httpx are noisy at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
