"""Utility modules for common functionality"""

from .random_utils import create_rng, time_seed
from .logging_utils import setup_logger

__all__ = ['create_rng', 'time_seed', 'setup_logger']
