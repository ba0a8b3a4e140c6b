"""
Logging Configuration
Centralized logging setup for the Paynow client
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance

    Level comes from PAYNOW_LOG_LEVEL (default WARNING). When PAYNOW_LOG_DIR
    is set, records are also written to a rotating paynow.log there.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = logging.getLevelName(os.getenv('PAYNOW_LOG_LEVEL', 'WARNING').upper())
        if not isinstance(level, int):
            level = logging.WARNING
        logger.setLevel(level)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            '%(levelname)s - %(name)s - %(message)s'
        ))
        logger.addHandler(console_handler)

        log_dir = os.getenv('PAYNOW_LOG_DIR')
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'paynow.log'),
                maxBytes=10485760,  # 10MB
                backupCount=10
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

    return logger
