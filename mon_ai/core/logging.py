import logging
from typing import List

from mon_ai.core.config import Settings

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(settings: Settings) -> None:
    """Configure the root logger once per process.

    Logs always go to stderr; when ``LOG_FILE`` is set they are mirrored
    into that file as well.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
