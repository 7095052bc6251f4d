"""
Genetic operators for the weighted bit-sum problem

This module contains the selection, crossover and mutation operators. Every
random draw goes through the generator passed in by the caller.
"""

from typing import Optional, Tuple

import numpy as np

from ..exceptions import ConfigurationError, PopulationError
from ..config.ga_config import is_integer, is_probability
from .fitness import NUM_GENES
from .population import Population


class TournamentSelection:
    """Tournament selection with tournament size k (default 5)"""
    
    def __init__(self, tournament_size: int = 5):
        if not is_integer(tournament_size) or tournament_size < 1:
            raise ConfigurationError("Tournament size must be at least 1", 'tournament_size')
        self.tournament_size = tournament_size
    
    def select(self, population: Population, rng: np.random.Generator) -> int:
        """
        Select an individual using tournament selection
        
        Draws tournament_size indices uniformly with replacement and keeps the
        one with the lowest error. On equal error the earlier draw wins.
        
        Returns:
            Index of the winner in ``population``
        """
        n = len(population)
        if n == 0:
            raise PopulationError("Cannot select from an empty population")
        
        best = int(rng.integers(0, n))
        for _ in range(1, self.tournament_size):
            candidate = int(rng.integers(0, n))
            if population[candidate].error < population[best].error:
                best = candidate
        return best


class SinglePointCrossover:
    """One-point crossover with a cut point in [1, NUM_GENES - 1]"""
    
    def crossover(self, parent1: np.ndarray, parent2: np.ndarray,
                  rng: Optional[np.random.Generator] = None,
                  cut_point: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Perform one-point crossover between two parent genomes
        
        Args:
            parent1: First parent genome
            parent2: Second parent genome
            rng: Generator used to draw the cut point
            cut_point: Fixed cut point. When given, nothing is drawn
            
        Returns:
            (parent1[:cut] + parent2[cut:], parent2[:cut] + parent1[cut:])
        """
        if cut_point is None:
            if rng is None:
                raise ValueError("Either rng or cut_point is required")
            # Never 0 or NUM_GENES: both parents contribute to each child
            cut_point = int(rng.integers(1, NUM_GENES))
        elif not 1 <= cut_point <= NUM_GENES - 1:
            raise ValueError(f"Cut point must be between 1 and {NUM_GENES - 1}, got {cut_point}")
        
        child1 = np.concatenate((parent1[:cut_point], parent2[cut_point:]))
        child2 = np.concatenate((parent2[:cut_point], parent1[cut_point:]))
        return child1, child2


class BitFlipMutation:
    """Bit-flip mutation operator"""
    
    def __init__(self, mutation_rate: float):
        if not is_probability(mutation_rate):
            raise ConfigurationError("Mutation rate must be between 0 and 1", 'mutation_rate')
        self.mutation_rate = mutation_rate
    
    def mutate(self, genome: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """
        Apply bit-flip mutation to a genome
        
        Each position flips independently when its uniform draw falls below
        the mutation rate. The input is left untouched.
        
        Returns:
            New genome array
        """
        genome = np.asarray(genome)
        flips = rng.random(NUM_GENES) < self.mutation_rate
        return np.where(flips, 1 - genome, genome)
