"""
Fitness model for the weighted bit-sum problem

A genome is a fixed-length bit-vector. Position i (0-based) carries the weight
(i + 1)^2 and the error of a genome is the distance between its weighted sum
and TARGET. An error of 0 is a perfect solution.
"""

from typing import Sequence

import numpy as np

NUM_GENES = 30
TARGET = 1977

GENE_WEIGHTS = np.arange(1, NUM_GENES + 1, dtype=np.int64) ** 2
GENE_WEIGHTS.setflags(write=False)


def as_genome(genome: Sequence[int]) -> np.ndarray:
    """Convert to an int64 array, checking length and bit values"""
    array = np.asarray(genome, dtype=np.int64)
    if array.shape != (NUM_GENES,):
        raise ValueError(f"Genome must have exactly {NUM_GENES} genes, got shape {array.shape}")
    if np.any((array != 0) & (array != 1)):
        raise ValueError("Genome values must be 0 or 1")
    return array


def weighted_sum(genome: Sequence[int]) -> int:
    """Sum of genome[i] * (i + 1)^2 over all positions"""
    return int(np.dot(as_genome(genome), GENE_WEIGHTS))


def calculate_error(genome: Sequence[int]) -> int:
    """
    Calculate the error of a genome
    
    Args:
        genome: Bit-vector of length NUM_GENES
        
    Returns:
        abs(weighted_sum(genome) - TARGET), lower is better
    """
    return abs(weighted_sum(genome) - TARGET)


def genome_to_string(genome: Sequence[int]) -> str:
    """Render a genome as a string of '0'/'1' characters"""
    return ''.join(str(int(bit)) for bit in genome)


def genome_from_string(text: str) -> np.ndarray:
    """
    Parse a string of '0'/'1' characters into a genome
    
    Raises:
        ValueError: If the text has the wrong length or other characters
    """
    text = text.strip()
    if len(text) != NUM_GENES or set(text) - {'0', '1'}:
        raise ValueError(f"Genome string must be {NUM_GENES} characters of '0' or '1': {text!r}")
    return np.fromiter((int(char) for char in text), dtype=np.int64, count=NUM_GENES)
