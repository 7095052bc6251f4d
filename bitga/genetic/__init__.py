"""Genetic algorithm components module"""

from .fitness import NUM_GENES, TARGET, calculate_error, weighted_sum, genome_to_string, genome_from_string
from .individual import Individual
from .population import Population
from .operators import TournamentSelection, SinglePointCrossover, BitFlipMutation

__all__ = [
    'NUM_GENES',
    'TARGET',
    'calculate_error',
    'weighted_sum',
    'genome_to_string',
    'genome_from_string',
    'Individual', 
    'Population', 
    'TournamentSelection', 
    'SinglePointCrossover', 
    'BitFlipMutation',
]
