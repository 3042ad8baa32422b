"""
Logging setup for validation runs

Handlers installed on the root logger:
- console: level follows the environment
- <log_dir>/<app_name>.log: INFO and above, rotated at midnight (30 days kept)
- <log_dir>/<app_name>_error.log: ERROR and above, rotated at 10MB
- <log_dir>/<app_name>_debug.log: everything, development only

Library modules only call logging.getLogger(__name__); the process calls
dataquality.dependencies.configure_logging() once at start-up.
"""
import logging
import logging.handlers
from pathlib import Path


LOG_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO
}

DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024


def _rotating_file(path: Path, level: int, backups: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path, maxBytes=MAX_LOG_BYTES, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(
    environment: str = "development",
    log_dir: str = "logs",
    app_name: str = "data_quality"
) -> None:
    """
    Install console and file handlers on the root logger.

    Args:
        environment: "development" | "test" | "production" (unknown values log at INFO)
        log_dir: Directory for log files, created if missing
        app_name: Prefix of the log file names
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_level = LOG_LEVELS.get(environment, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # detach only, handlers may belong to someone else
    root_logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(log_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console)

    daily = logging.handlers.TimedRotatingFileHandler(
        filename=log_path / f"{app_name}.log",
        when="midnight",
        backupCount=30,
        encoding="utf-8"
    )
    daily.setLevel(logging.INFO)
    daily.setFormatter(logging.Formatter(DETAILED_FORMAT, DATE_FORMAT))
    daily.suffix = "%Y-%m-%d"
    root_logger.addHandler(daily)

    root_logger.addHandler(_rotating_file(log_path / f"{app_name}_error.log", logging.ERROR, 5))

    if environment == "development":
        root_logger.addHandler(_rotating_file(log_path / f"{app_name}_debug.log", logging.DEBUG, 3))

    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging initialized: environment={environment}, "
        f"level={logging.getLevelName(log_level)}, dir={log_path.absolute()}"
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
