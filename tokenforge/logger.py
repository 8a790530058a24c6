"""
Thread-safe application logger with a message queue for the UI layer

Messages go to the 'TokenForge' stdlib logger (configured by
logging_config.setup_logging) and, from INFO upwards, into a queue the
presentation layer drains to show notifications ("Copied!", "Custom
spacing added", ...).
"""
import queue
import logging
from datetime import datetime

from app_config import APP_NAME


class AppLogger:
    """Logger facade with a GUI message queue and optional error callback"""

    def __init__(self, name=APP_NAME):
        self.message_queue = queue.Queue()
        self.error_callback = None
        self.file_logger = logging.getLogger(name)

    def set_error_callback(self, callback):
        """Set callback invoked with the text of every ERROR message"""
        self.error_callback = callback

    def log(self, message, level="INFO"):
        """Log a message and queue it for the UI when it is INFO or above"""
        log_level = getattr(logging, level, logging.INFO)
        self.file_logger.log(log_level, message)

        if log_level >= logging.INFO:
            timestamp = datetime.now().strftime('%H:%M:%S')
            self.message_queue.put(f"[{timestamp}] {level}: {message}")

        if level == "ERROR" and self.error_callback:
            try:
                self.error_callback(message)
            except Exception as e:
                self.file_logger.warning(f"Error callback failed: {e}")

    def info(self, message):
        """Log info message"""
        self.log(message, "INFO")

    def error(self, message):
        """Log error message"""
        self.log(message, "ERROR")

    def warning(self, message):
        """Log warning message"""
        self.log(message, "WARNING")

    def debug(self, message):
        """Log debug message"""
        self.log(message, "DEBUG")

    def get_messages(self):
        """Get all queued messages (non-blocking)"""
        messages = []
        while not self.message_queue.empty():
            try:
                messages.append(self.message_queue.get_nowait())
            except queue.Empty:
                break
        return messages


# Singleton pattern to ensure only one logger instance
_logger_instance = None

def get_app_logger():
    """Get or create the singleton logger instance"""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = AppLogger()
    return _logger_instance

# Global logger instance (singleton)
app_logger = get_app_logger()
