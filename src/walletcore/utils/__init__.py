# src/walletcore/utils/__init__.py
from .logger import setup_logging, get_logger
from .config import Config

__all__ = ['setup_logging', 'get_logger', 'Config']
