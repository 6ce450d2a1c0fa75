import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional, Union

from .config import Config
from ..exceptions import ConfigurationError

def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Create a logger with the given name and level"""
    logger = logging.getLogger(name)

    if not logger.handlers:  # Only add handler if none exists
        handler = logging.StreamHandler()
        formatter = logging.Formatter(Config.LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif not logger.level:  # Only set default level if none is set
        logger.setLevel(logging.INFO)

    return logger

def setup_logging(
    level: Union[int, str] = Config.LOG_LEVEL,
    log_dir: Optional[str] = None,
    max_size: int = Config.LOG_MAX_BYTES,
    backup_count: int = Config.LOG_BACKUP_COUNT
) -> logging.Logger:
    """Configure the root logger with a console handler and an optional rotating file"""
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {name}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(Config.CONSOLE_LOG_FORMAT))
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(
            log_dir,
            f'walletcore_{datetime.now().strftime("%Y%m%d")}.log'
        )
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_size,
            backupCount=backup_count
        )
        file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    return root_logger
