"""Weighted bit-sum genetic algorithm"""

__version__ = "1.0.0"
