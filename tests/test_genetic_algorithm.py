"""Tests for the evolution driver"""

import logging

import numpy as np
import pytest

from bitga.algorithms import GeneticAlgorithm
from bitga.config import GAConfig
from bitga.exceptions import ConfigurationError
from bitga.genetic import (Individual, Population, calculate_error, TournamentSelection,
                           SinglePointCrossover, BitFlipMutation)


def make_ga(callback=None, **kwargs):
    kwargs.setdefault('random_seed', 2024)
    return GeneticAlgorithm.from_config(GAConfig(**kwargs), generation_callback=callback)


class Recorder:
    """Collects the per-generation reports"""

    def __init__(self):
        self.reports = []

    def __call__(self, generation, individual):
        self.reports.append((generation, individual.to_bitstring(), individual.error))


def test_single_generation_reports_best_initial_individual():
    recorder = Recorder()
    ga = make_ga(recorder, max_generations=1, population_size=2, mutation_rate=0.0,
                 tournament_size=1, random_seed=31)
    results = ga.run()

    initial = Population.random(2, np.random.default_rng(31))
    expected = initial[0] if initial[0].error <= initial[1].error else initial[1]
    for individual in initial:
        assert individual.error == calculate_error(individual.genome)

    assert recorder.reports == [(1, expected.to_bitstring(), expected.error)]
    assert results['generations_run'] == 1
    assert results['best_error'] == expected.error
    assert results['best_generation'] == 1


def test_injected_perfect_genome_stops_after_first_generation(perfect_genome, rng):
    recorder = Recorder()
    ga = make_ga(recorder, max_generations=100, population_size=6)
    individuals = [Individual(rng.integers(0, 2, size=30)) for _ in range(5)]
    individuals.insert(3, Individual(perfect_genome))

    results = ga.run(Population.from_individuals(individuals))

    assert results['success']
    assert results['best_error'] == 0
    assert results['best_generation'] == 1
    assert results['generations_run'] == 1
    assert results['best_individual']['genome'] == Individual(perfect_genome).to_bitstring()
    assert len(recorder.reports) == 1
    assert recorder.reports[0][2] == 0
    assert results['discarded_children'] == 0


def test_population_size_and_cache_coherence_hold_every_generation():
    checked = []

    def check(generation, individual):
        population = ga.population
        assert len(population) == 8
        assert population.is_filled()
        for member in population:
            assert member.error == calculate_error(member.genome)
        assert individual is population.best_individual()
        checked.append(generation)

    ga = make_ga(check, max_generations=30, population_size=8, mutation_rate=0.1)
    results = ga.run()
    assert checked == list(range(1, results['generations_run'] + 1))


def test_buffers_are_swapped_not_reallocated():
    buffers = []

    def remember(generation, individual):
        buffers.append(id(ga.population))

    ga = make_ga(remember, max_generations=6, population_size=4, mutation_rate=1.0, random_seed=5)
    results = ga.run()
    if results['generations_run'] >= 3:
        assert buffers[0] == buffers[2]
        assert buffers[0] != buffers[1]
    assert len(set(buffers)) <= 2


def test_best_so_far_never_gets_worse():
    ga = make_ga(max_generations=50, population_size=10, mutation_rate=0.3)
    results = ga.run()
    history = results['best_error_history']
    assert results['best_error'] == min(history)
    assert history[results['best_generation'] - 1] == results['best_error']
    # The generation found is the first one reaching the best error
    assert results['best_error'] not in history[:results['best_generation'] - 1]


def test_same_seed_reproduces_run():
    first = make_ga(max_generations=20, population_size=10, random_seed=77).run()
    second = make_ga(max_generations=20, population_size=10, random_seed=77).run()
    assert first['best_error_history'] == second['best_error_history']
    assert first['best_individual'] == second['best_individual']


def test_explicit_rng_is_used():
    config = GAConfig(max_generations=5, population_size=6, random_seed=None)
    first = GeneticAlgorithm.from_config(config, rng=np.random.default_rng(4)).run()
    second = GeneticAlgorithm.from_config(config, rng=np.random.default_rng(4)).run()
    assert first['best_error_history'] == second['best_error_history']


def test_budget_exhaustion_sets_reason():
    ga = make_ga(max_generations=2, population_size=4, mutation_rate=0.0)
    results = ga.run()
    if not results['success']:
        assert results['generations_run'] == 2
        assert results['termination_reason'] == "Maximum generations reached (2)"


class TestOddPopulation:

    def test_one_child_discarded_and_no_stale_slots(self, zeros):
        ga = make_ga(population_size=5)
        source = Population.random(5, ga.rng)
        sentinel = Individual(zeros)
        target = Population.from_individuals([sentinel] * 5)

        discarded = ga.evolve_population(source, target)

        assert discarded == 1
        assert target.is_filled()
        assert len(target) == 5
        for member in target:
            assert member is not sentinel
            assert member.error == calculate_error(member.genome)

    def test_even_population_discards_nothing(self):
        ga = make_ga(population_size=6)
        source = Population.random(6, ga.rng)
        assert ga.evolve_population(source, Population.empty(6)) == 0

    def test_full_run_counts_one_discard_per_generation(self):
        ga = make_ga(max_generations=10, population_size=7)
        results = ga.run()
        breeding_steps = results['generations_run'] - (1 if results['success'] else 0)
        assert results['discarded_children'] == breeding_steps


class TestConfigurationChecks:

    @pytest.mark.parametrize("kwargs", [
        {'population_size': 0},
        {'max_generations': 0},
        {'max_generations': -5},
        {'mutation_rate': 1.5},
        {'tournament_size': 0},
    ])
    def test_invalid_config_is_rejected_before_running(self, kwargs):
        with pytest.raises(ConfigurationError):
            make_ga(**kwargs)

    def test_initial_population_size_must_match(self, rng):
        ga = make_ga(population_size=4)
        with pytest.raises(ConfigurationError):
            ga.run(Population.random(3, rng))


def test_injected_population_is_left_untouched(rng):
    injected = Population.random(6, rng)
    before = [individual.to_bitstring() for individual in injected]

    ga = make_ga(max_generations=5, population_size=6, mutation_rate=0.5)
    results = ga.run(injected)

    assert results['generations_run'] >= 1
    assert ga.population is not injected
    assert ga.next_population is not injected
    assert [individual.to_bitstring() for individual in injected] == before


class TestOperatorConsistency:

    def test_mutation_rate_must_match_config(self):
        config = GAConfig(max_generations=3, population_size=4, mutation_rate=0.0,
                          tournament_size=1, random_seed=1)
        with pytest.raises(ConfigurationError) as excinfo:
            GeneticAlgorithm(config, TournamentSelection(1), SinglePointCrossover(), BitFlipMutation(1.0))
        assert excinfo.value.field == 'mutation_rate'

    def test_tournament_size_must_match_config(self):
        config = GAConfig(max_generations=3, population_size=4, mutation_rate=0.0,
                          tournament_size=5, random_seed=1)
        with pytest.raises(ConfigurationError) as excinfo:
            GeneticAlgorithm(config, TournamentSelection(1), SinglePointCrossover(), BitFlipMutation(0.0))
        assert excinfo.value.field == 'tournament_size'

    def test_reported_config_matches_operators(self):
        ga = make_ga(max_generations=3, population_size=4, mutation_rate=0.25, tournament_size=2)
        results = ga.run()
        assert results['config']['mutation_rate'] == ga.mutation_operator.mutation_rate
        assert results['config']['tournament_size'] == ga.selection_operator.tournament_size

    def test_odd_population_warning_logged_once(self, caplog):
        with caplog.at_level(logging.WARNING, logger='bitga'):
            make_ga(population_size=5)
        assert sum('odd' in record.getMessage() for record in caplog.records) == 1

    @pytest.mark.parametrize("kwargs", [
        {'mutation_rate': 'high'},
        {'tournament_size': 2.5},
    ])
    def test_badly_typed_parameters_raise_configuration_error(self, kwargs):
        with pytest.raises(ConfigurationError):
            make_ga(**kwargs)
