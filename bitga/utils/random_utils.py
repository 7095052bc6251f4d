"""
Random utilities for reproducibility

Every random draw of a run goes through one numpy Generator created here and
passed explicitly to the initializer and the genetic operators.
"""

import logging
import time
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


def time_seed() -> int:
    """Seed derived from the wall clock, like seeding a C PRNG with time()"""
    return int(time.time_ns() % (2 ** 32))


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the random generator for a run
    
    Args:
        seed: Random seed value. If None, one is derived from the clock
        
    Returns:
        Seeded numpy Generator
    """
    if seed is None:
        seed = time_seed()
        logger.info(f"No seed given, using clock seed {seed}")
    return np.random.default_rng(seed)
