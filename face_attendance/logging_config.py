"""
Logging configuration for Face Attendance.

Console logging tagged with the camera source, so output from the live loop,
the ledger and the reporting server can be told apart per camera.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] [camera=%(camera_source)s] %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


class CameraSourceFilter(logging.Filter):
    """Attach the camera source to every record."""

    def __init__(self, camera_source: str):
        super().__init__()
        self.camera_source = camera_source

    def filter(self, record: logging.LogRecord) -> bool:
        record.camera_source = self.camera_source
        return True


def setup_logging(camera_source: str, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        camera_source: Camera index or URL shown in every log line
        debug: Enable debug level logging
    """
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.addFilter(CameraSourceFilter(camera_source))
    root_logger.addHandler(handler)

    # Flask request lines only in debug mode
    logging.getLogger('werkzeug').setLevel(level if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
