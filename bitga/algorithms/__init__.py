"""Evolution driver module"""

from .genetic_algorithm import GeneticAlgorithm, GenerationCallback

__all__ = ['GeneticAlgorithm', 'GenerationCallback']
