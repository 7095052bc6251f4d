"""Tests for population buffers"""

import numpy as np
import pytest

from bitga.exceptions import PopulationError
from bitga.genetic import NUM_GENES, Individual, Population, calculate_error


def test_random_population_is_evaluated(rng):
    population = Population.random(40, rng)
    assert len(population) == 40
    assert population.is_filled()
    for individual in population:
        assert individual.genome.shape == (NUM_GENES,)
        assert set(np.unique(individual.genome)) <= {0, 1}
        assert individual.error == calculate_error(individual.genome)


def test_random_population_consumes_n_times_genes_draws():
    rng = np.random.default_rng(99)
    population = Population.random(3, rng)
    reference = np.random.default_rng(99)
    for individual in population:
        assert np.array_equal(individual.genome, reference.integers(0, 2, size=NUM_GENES))
    assert rng.random() == reference.random()


def test_same_seed_same_population():
    first = Population.random(10, np.random.default_rng(1))
    second = Population.random(10, np.random.default_rng(1))
    assert first.individuals == second.individuals


def test_empty_buffer_slots_are_unreadable():
    population = Population.empty(4)
    assert not population.is_filled()
    with pytest.raises(PopulationError):
        population[0]


def test_only_individuals_can_be_stored(zeros):
    population = Population.empty(2)
    with pytest.raises(PopulationError):
        population[0] = zeros


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_is_rejected(size):
    with pytest.raises(PopulationError):
        Population.empty(size)


def test_best_index_prefers_first_on_ties(zeros, perfect_genome):
    worse = Individual(zeros)
    best = Individual(perfect_genome)
    population = Population.from_individuals([worse, best, best.copy(), worse])
    assert population.best_index() == 1
    assert population.best_individual() is best


def test_statistics(zeros, ones):
    population = Population.from_individuals([Individual(zeros), Individual(ones)])
    stats = population.get_statistics()
    assert stats['best_error'] == 1977
    assert stats['worst_error'] == 9455 - 1977
    assert stats['mean_error'] == pytest.approx((1977 + 9455 - 1977) / 2)
    assert stats['diversity'] == pytest.approx(1.0)


def test_identical_population_has_no_diversity(perfect_genome):
    population = Population.from_individuals([Individual(perfect_genome) for _ in range(5)])
    assert population.get_statistics()['diversity'] == 0.0


def test_diversity_matches_pairwise_hamming(rng):
    population = Population.random(7, rng)
    genomes = [individual.genome for individual in population]
    distances = [np.sum(genomes[i] != genomes[j]) / NUM_GENES
                 for i in range(7) for j in range(i + 1, 7)]
    assert population.get_statistics()['diversity'] == pytest.approx(np.mean(distances))
