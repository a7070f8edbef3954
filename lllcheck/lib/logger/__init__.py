"""
lllcheck Logger Module

Usage:
    from lllcheck.lib.logger import get_logger

    logger = get_logger("lllcheck")
    with logger.timed("check_files"):
        logger.debug("Checking files...")
"""
from .python_logger import (
    LLLCheckLogger,
    get_logger,
    reset_session,
    ENV_LOG_DIR,
    ENV_VERBOSE,
)

__all__ = [
    'LLLCheckLogger',
    'get_logger',
    'reset_session',
    'ENV_LOG_DIR',
    'ENV_VERBOSE',
]
