"""Logging infrastructure for passpolicy.

Console output always, plus a rotating file under the configured log
directory when file logging is enabled.
"""

import logging
import logging.handlers
import os

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
MAX_LOG_BYTES = 10485760  # 10MB
LOG_BACKUP_COUNT = 5


def setup_logger(
    name: str,
    log_dir: str = "/var/log/passpolicy",
    level: str = "INFO",
    file_logging: bool = False,
) -> logging.Logger:
    """Configure the named logger from passpolicy settings.

    Args:
        name: Logger name, normally "passpolicy"
        log_dir: Directory for ``{name}.log`` when file logging is on
        level: Level name, case-insensitive
        file_logging: Also write to a rotating log file

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level is not a known logging level
    """
    level_upper = level.upper()
    if level_upper not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: {', '.join(VALID_LEVELS)}"
        )

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_upper))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{name}.log"),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the passpolicy namespace.

    Args:
        name: Component name (e.g. "config", "dictionary")

    Returns:
        Logger instance
    """
    if name == "passpolicy" or name.startswith("passpolicy."):
        return logging.getLogger(name)
    return logging.getLogger(f"passpolicy.{name}")
