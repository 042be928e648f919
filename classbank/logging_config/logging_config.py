import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10_000_000  # 10MB
LOG_BACKUPS = 5


def _rotating_handler(path: Path, level: int, name: str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.set_name(name)
    return handler


def setup_logging(app_name: str = "classbank-bot") -> None:
    """Send maintenance reports to the console and to rotating log files

    Safe to call more than once: handlers already installed for
    ``app_name`` are not added again.

    Args:
        app_name: Name to use for log files

    """
    log_dir = Path(os.getenv("LOG_DIR", "/data/logs"))
    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.set_name(f"{app_name}-console")

    handlers = [
        console_handler,
        _rotating_handler(log_dir / f"{app_name}.log", logging.INFO, f"{app_name}-file"),
        # ERROR and above also go to their own file
        _rotating_handler(log_dir / f"{app_name}-error.log", logging.ERROR, f"{app_name}-error"),
    ]

    installed = {handler.get_name() for handler in root_logger.handlers}
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        if handler.get_name() in installed:
            handler.close()
            continue
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
