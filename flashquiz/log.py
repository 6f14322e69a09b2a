"""
Logging setup for scripts that use flashquiz.

The library itself only emits records through module loggers; call
setup_logging() from an entry point to see them.
"""

import json
import logging

PACKAGE_LOGGER = 'flashquiz'

TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class JsonFormatter(logging.Formatter):
    """One JSON object per record; the message is escaped like any other value"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'time': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'module': record.module,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(log_level: str = 'INFO', json_format: bool = False,
                  stream=None) -> logging.Logger:
    """
    Configure the flashquiz logger with a single console handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit one JSON object per record instead of plain text
        stream: Stream for the handler (default: stderr)

    Returns:
        The configured package logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Drop handlers from earlier calls so records are not duplicated
    logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter(datefmt=DATE_FORMAT)
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
