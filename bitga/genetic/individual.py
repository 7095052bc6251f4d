"""
Individual representation for genetic algorithm

An individual pairs a genome with its error. The error is computed when the
individual is created and the genome is frozen, so the cached value always
matches the genome.
"""

from typing import Sequence

import numpy as np

from .fitness import calculate_error, genome_to_string, as_genome


class Individual:
    """Represents a binary chromosome and its cached error"""
    
    __slots__ = ('genome', 'error')
    
    def __init__(self, genome: Sequence[int]):
        """
        Initialize individual and evaluate it
        
        Args:
            genome: Bit-vector of length NUM_GENES. It is copied, the caller
                keeps ownership of the original
        """
        genome = as_genome(genome).copy()
        genome.setflags(write=False)
        self.genome: np.ndarray = genome
        self.error: int = calculate_error(genome)
    
    @property
    def is_perfect(self) -> bool:
        """True when the weighted sum hits the target exactly"""
        return self.error == 0
    
    def to_bitstring(self) -> str:
        return genome_to_string(self.genome)
    
    def copy(self) -> 'Individual':
        """
        Create a deep copy of the individual
        
        Returns:
            New Individual instance with copied genome
        """
        return Individual(self.genome)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        return np.array_equal(self.genome, other.genome)
    
    def __hash__(self) -> int:
        return hash(self.genome.tobytes())
    
    def __repr__(self) -> str:
        return f"Individual(genome={self.to_bitstring()}, error={self.error})"
