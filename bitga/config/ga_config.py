"""
Genetic Algorithm Configuration

This module contains the run parameters for the weighted bit-sum genetic algorithm.
"""

import logging
import numbers
from dataclasses import dataclass, asdict
from typing import Optional

import numpy as np

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Default run parameters
DEFAULT_MAX_GENERATIONS = 100
DEFAULT_POPULATION_SIZE = 40
DEFAULT_MUTATION_RATE = 0.05
DEFAULT_TOURNAMENT_SIZE = 5


@dataclass
class GAConfig:
    """Configuration parameters for the Genetic Algorithm"""
    
    # Population parameters
    max_generations: int = DEFAULT_MAX_GENERATIONS
    population_size: int = DEFAULT_POPULATION_SIZE
    
    # Genetic operator parameters
    mutation_rate: float = DEFAULT_MUTATION_RATE
    tournament_size: int = DEFAULT_TOURNAMENT_SIZE
    
    # Reproducibility (None seeds from the clock)
    random_seed: Optional[int] = None
    
    def validate(self) -> None:
        """
        Validate configuration parameters
        
        Raises:
            ConfigurationError: If any parameter is out of range
        """
        # Population parameters
        if not is_integer(self.max_generations) or self.max_generations <= 0:
            raise ConfigurationError("Max generations must be a positive integer", 'max_generations')
        if not is_integer(self.population_size) or self.population_size <= 0:
            raise ConfigurationError("Population size must be a positive integer", 'population_size')
        
        # Genetic operator parameters
        if not is_probability(self.mutation_rate):
            raise ConfigurationError("Mutation rate must be between 0 and 1", 'mutation_rate')
        if not is_integer(self.tournament_size) or self.tournament_size < 1:
            raise ConfigurationError("Tournament size must be at least 1", 'tournament_size')
        
        # Reproducibility parameters
        if self.random_seed is not None and (not is_integer(self.random_seed) or self.random_seed < 0):
            raise ConfigurationError("Random seed must be a non-negative integer", 'random_seed')
        
        if self.population_size % 2 == 1:
            logger.warning(f"Population size {self.population_size} is odd: the second child "
                           f"of the last pair is discarded every generation")
    
    def to_dict(self) -> dict:
        """Convert configuration to dictionary"""
        return asdict(self)


def is_integer(value) -> bool:
    """Python or numpy integer, booleans excluded"""
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def is_probability(value) -> bool:
    """Real number in [0, 1], booleans excluded"""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)) and 0 <= value <= 1
