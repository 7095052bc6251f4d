"""
Population management for genetic algorithm

A population is a fixed-size buffer of individual slots. The driver keeps two
of them and swaps them every generation, so slots are overwritten in place
rather than the buffer being rebuilt.
"""

from typing import List, Optional, Dict, Any, Iterator, Sequence

import numpy as np

from ..exceptions import PopulationError
from .fitness import NUM_GENES
from .individual import Individual


class Population:
    """Manages a fixed-size collection of individuals"""
    
    def __init__(self, size: int):
        """
        Initialize an empty population buffer
        
        Args:
            size: Number of individual slots
        """
        if size <= 0:
            raise PopulationError(f"Population size must be positive, got {size}")
        self.size = size
        self._slots: List[Optional[Individual]] = [None] * size
    
    @classmethod
    def empty(cls, size: int) -> 'Population':
        """Create a buffer with every slot unfilled"""
        return cls(size)
    
    @classmethod
    def random(cls, size: int, rng: np.random.Generator) -> 'Population':
        """
        Create a population of random individuals
        
        Each individual draws NUM_GENES independent uniform bits, so the call
        consumes size * NUM_GENES draws from ``rng``.
        
        Args:
            size: Number of individuals
            rng: Shared random generator
        """
        population = cls(size)
        for i in range(size):
            population[i] = Individual(rng.integers(0, 2, size=NUM_GENES))
        return population
    
    @classmethod
    def from_individuals(cls, individuals: Sequence[Individual]) -> 'Population':
        """Create a population holding the given individuals in order"""
        population = cls(len(individuals))
        for i, individual in enumerate(individuals):
            population[i] = individual
        return population
    
    def __getitem__(self, index: int) -> Individual:
        individual = self._slots[index]
        if individual is None:
            raise PopulationError(f"Slot {index} has not been filled")
        return individual
    
    def __setitem__(self, index: int, individual: Individual) -> None:
        if not isinstance(individual, Individual):
            raise PopulationError(f"Slot {index} can only hold an Individual")
        self._slots[index] = individual
    
    def __len__(self) -> int:
        """Return population size"""
        return self.size
    
    def __iter__(self) -> Iterator[Individual]:
        """Make population iterable"""
        return (self[i] for i in range(self.size))
    
    @property
    def individuals(self) -> List[Individual]:
        return list(self)
    
    def is_filled(self) -> bool:
        """True when every slot holds an individual"""
        return all(slot is not None for slot in self._slots)
    
    def errors(self) -> np.ndarray:
        """Errors of all individuals in slot order"""
        return np.array([individual.error for individual in self], dtype=np.int64)
    
    def best_index(self) -> int:
        """
        Index of the minimum-error individual
        
        Ties go to the lowest index.
        """
        best = 0
        for i in range(1, self.size):
            if self[i].error < self[best].error:
                best = i
        return best
    
    def best_individual(self) -> Individual:
        return self[self.best_index()]
    
    def get_statistics(self) -> Dict[str, Any]:
        """
        Calculate population statistics
        
        Returns:
            Dictionary with population statistics
        """
        errors = self.errors()
        return {
            'best_error': int(errors.min()),
            'worst_error': int(errors.max()),
            'mean_error': float(errors.mean()),
            'std_error': float(errors.std()),
            'diversity': self._calculate_diversity(),
        }
    
    def _calculate_diversity(self) -> float:
        """Average pairwise Hamming distance, normalized by genome length"""
        if self.size < 2:
            return 0.0
        
        genomes = np.stack([individual.genome for individual in self])
        # Per position, the number of differing pairs is ones * zeros
        ones = genomes.sum(axis=0)
        differing_pairs = int(np.sum(ones * (self.size - ones)))
        comparisons = self.size * (self.size - 1) // 2
        return differing_pairs / (comparisons * NUM_GENES)
    
    def __repr__(self) -> str:
        return f"Population(size={self.size}, filled={self.is_filled()})"
