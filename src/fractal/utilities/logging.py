import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "FRACTAL_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".fractal") / "logs"
LOG_FILENAME = "fractal.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5

_configured: set[str] = set()
_file_handlers: dict[Path, RotatingFileHandler] = {}


def _resolve_log_directory() -> Path:
    """Return the directory where log files should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def _resolve_level(log_level: str | int) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(log_level.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _shared_file_handler(formatter: logging.Formatter) -> RotatingFileHandler:
    """Return the rotating handler for the current log directory.

    Every fractal logger appends to the same file, so handlers are cached by
    path rather than created per logger.
    """

    log_path = _resolve_log_directory() / LOG_FILENAME
    handler = _file_handlers.get(log_path)
    if handler is None:
        handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        )
        handler.setFormatter(formatter)
        _file_handlers[log_path] = handler
    return handler


def _configure_logger(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)

    if logger.name in _configured or logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    logger.addHandler(_shared_file_handler(formatter))
    logger.propagate = False
    _configured.add(logger.name)


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and the shared rotating log file."""

    level = _resolve_level(os.getenv(LOG_LEVEL_ENV_VAR, "INFO"))
    logger = logging.getLogger(name)
    _configure_logger(logger, level)
    return logger


def set_log_level(log_level: str | int) -> int:
    """Apply ``log_level`` to every logger created by ``get_logger``.

    Also exported as ``LOG_LEVEL`` so loggers created later pick it up.
    Returns the numeric level.
    """

    level = _resolve_level(log_level)
    os.environ[LOG_LEVEL_ENV_VAR] = logging.getLevelName(level)
    for name in _configured:
        logging.getLogger(name).setLevel(level)
    return level
