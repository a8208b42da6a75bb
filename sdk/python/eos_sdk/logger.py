"""
Logging configuration for scripts using the SDK.

The SDK itself only creates module loggers; applications decide where the
output goes.
"""

import logging
import sys
from typing import Optional, Union

from .constants import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    log_level: Union[int, str] = LOG_LEVEL,
    log_format: str = LOG_FORMAT,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Minimum level, name or number
        log_format: Format string for log records
        log_file: Optional path of a file receiving the same records
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # urllib3 retries are noisy at DEBUG and unrelated to endpoint failover
    logging.getLogger('urllib3').setLevel(logging.WARNING)
