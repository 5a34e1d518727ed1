import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

from healthhub.config import get_settings

ROOT_LOGGER_NAME = "healthhub"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB

CONSOLE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
FILE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_configured = False


def _rotating(path: Path, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=5)
    handler.setLevel(level)
    handler.setFormatter(FILE_FORMAT)
    return handler


def setup_logging() -> logging.Logger:
    """Attach console + rotating file handlers to the `healthhub` logger once.

    app.log receives INFO and above, errors.log only ERROR and above. The log
    directory comes from LOG_DIR; an empty value disables file output.
    """
    global _configured
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return logger

    settings = get_settings()
    level = logging.DEBUG if settings.APP_DEBUG else logging.INFO
    logger.setLevel(level)

    # Prevent duplicate logs on reload
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(CONSOLE_FORMAT)
    logger.addHandler(console_handler)

    if settings.LOG_DIR:
        logs_dir = Path(settings.LOG_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating(logs_dir / "app.log", logging.INFO))
        logger.addHandler(_rotating(logs_dir / "errors.log", logging.ERROR))

    _configured = True
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance. If name is provided, returns a child logger."""
    logger = setup_logging()
    if name:
        return logger.getChild(name)
    return logger
