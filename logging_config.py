r"""
Logging configuration with 7-day rolling file retention
Writes to {app data dir}\Logs with automatic cleanup
"""
import os
import sys
import logging
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime, timedelta

from app_config import LOG_FILE
from utils_paths import get_log_dir


def cleanup_old_logs(log_dir, days_to_keep=7):
    """
    Remove log files older than specified days

    Args:
        log_dir: Directory containing log files
        days_to_keep: Number of days to retain (default: 7)
    """
    if not os.path.exists(log_dir):
        return

    cutoff_date = datetime.now() - timedelta(days=days_to_keep)

    try:
        for filename in os.listdir(log_dir):
            file_path = os.path.join(log_dir, filename)

            if not os.path.isfile(file_path):
                continue

            file_mtime = datetime.fromtimestamp(os.path.getmtime(file_path))

            if file_mtime < cutoff_date:
                try:
                    os.remove(file_path)
                except OSError as e:
                    print(f"Failed to remove {filename}: {e}", file=sys.stderr)

    except OSError as e:
        print(f"Error during log cleanup: {e}", file=sys.stderr)


def setup_logging(console_level=logging.INFO, log_dir=None):
    r"""
    Configure application logging with file rotation and cleanup

    Sets up:
    - Console logging (INFO level by default)
    - File logging with daily rotation (DEBUG level)
    - Automatic cleanup of logs older than 7 days

    Args:
        console_level: Level for the stderr handler
        log_dir: Override for the log directory (default: get_log_dir())

    Log location: {app data dir}\Logs\tokenforge.log
    """
    # Silence noisy third-party loggers first
    for logger_name in ['numpy', 'matplotlib', 'PIL']:
        noisy_logger = logging.getLogger(logger_name)
        noisy_logger.setLevel(logging.CRITICAL)
        noisy_logger.propagate = False

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)  # Capture everything, handlers filter

    # Remove any existing handlers (in case setup_logging is called multiple times)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler on stderr so exports written to stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_format = logging.Formatter(
        '[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler - Daily rotation, keep 7 days
    try:
        if log_dir is None:
            log_dir = get_log_dir()
        log_file = os.path.join(log_dir, LOG_FILE)
        cleanup_old_logs(log_dir, days_to_keep=7)

        file_handler = TimedRotatingFileHandler(
            log_file,
            when='midnight',
            interval=1,
            backupCount=7,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

        logger.debug(f"Logging initialized - Log file: {log_file}")

    except OSError as e:
        # If file logging fails, at least we have console
        logger.error(f"Failed to initialize file logging: {e}")
        logger.warning("Continuing with console logging only")

    return logger
