import os
import logging
from logging.handlers import RotatingFileHandler

EVENTS_LEVEL_NUM = 38
DEFAULT_LOG_BACKUP_COUNT = 10


def setup_events_logger(full_path, events_retention_size, distributor_id=None):
    """
    Setup the audit events logger for enrollments, completions and admin changes.

    Args:
        full_path: Base directory for log files
        events_retention_size: Maximum size of log files before rotation
        distributor_id: Optional distributor ID to include in logger and file name (default: None)
    """
    logging.addLevelName(EVENTS_LEVEL_NUM, "EVENT")

    logger_name = f"event.{distributor_id}" if distributor_id is not None else "event"
    logger = logging.getLogger(logger_name)
    logger.setLevel(EVENTS_LEVEL_NUM)
    logger.propagate = False

    def event(self, message, *args, **kws):
        if self.isEnabledFor(EVENTS_LEVEL_NUM):
            self._log(EVENTS_LEVEL_NUM, message, args, **kws)

    logging.Logger.event = event

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Include distributor ID in filename if provided
    log_filename = f"events_{distributor_id}.log" if distributor_id is not None else "events.log"

    log_path = os.path.abspath(os.path.join(full_path, log_filename))
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_path:
            return logger

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=events_retention_size,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(EVENTS_LEVEL_NUM)
    logger.addHandler(file_handler)

    return logger
