#!/usr/bin/env python3
"""
Command line entry point

Usage: bitga [generations] [population_size] [mutation_rate] [tournament_size] [options]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .algorithms import GeneticAlgorithm
from .config import GAConfig
from .config.ga_config import (DEFAULT_MAX_GENERATIONS, DEFAULT_POPULATION_SIZE,
                               DEFAULT_MUTATION_RATE, DEFAULT_TOURNAMENT_SIZE)
from .exceptions import ConfigurationError
from .experiments import ExperimentRunner
from .reporting import ConsoleReporter, GAReporter
from .utils import setup_logger

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bitga',
        description=('Evolve 30-bit strings whose weighted sum '
                     'sum(bit_i * i^2) hits the target 1977.'))
    parser.add_argument('generations', nargs='?', type=int, default=DEFAULT_MAX_GENERATIONS,
                        help=f'generation budget (default {DEFAULT_MAX_GENERATIONS})')
    parser.add_argument('population_size', nargs='?', type=int, default=DEFAULT_POPULATION_SIZE,
                        help=f'individuals per generation, even recommended (default {DEFAULT_POPULATION_SIZE})')
    parser.add_argument('mutation_rate', nargs='?', type=float, default=DEFAULT_MUTATION_RATE,
                        help=f'per-bit flip probability (default {DEFAULT_MUTATION_RATE})')
    parser.add_argument('tournament_size', nargs='?', type=int, default=DEFAULT_TOURNAMENT_SIZE,
                        help=f'tournament size k (default {DEFAULT_TOURNAMENT_SIZE})')
    parser.add_argument('--seed', type=int, default=None,
                        help='random seed (default: derived from the clock)')
    parser.add_argument('--runs', type=int, default=1,
                        help='number of independent runs, seeds seed, seed+1, ... (default 1)')
    parser.add_argument('--results-dir', default=None,
                        help='write JSON/CSV results to this directory')
    parser.add_argument('--plots-dir', default=None,
                        help='write evolution plots to this directory')
    parser.add_argument('--log-file', default=None, help='also write logs to this file')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='logging level (default WARNING)')
    parser.add_argument('--quiet', action='store_true',
                        help='do not print one line per generation')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function, returns the process exit code"""
    args = build_parser().parse_args(argv)
    setup_logger('bitga', args.log_file, args.log_level)
    
    config = GAConfig(
        max_generations=args.generations,
        population_size=args.population_size,
        mutation_rate=args.mutation_rate,
        tournament_size=args.tournament_size,
        random_seed=args.seed,
    )
    console = ConsoleReporter(show_generations=not args.quiet and args.runs == 1)
    
    try:
        if args.runs == 1:
            ga = GeneticAlgorithm.from_config(config, generation_callback=console.report_generation)
            results = ga.run()
            console.report_final(results)
            _save_run(results, args)
        else:
            runner = ExperimentRunner(config, num_runs=args.runs,
                                      generation_callback=console.report_generation)
            experiment = runner.run()
            console.report_experiment(experiment['summary'])
            _save_experiment(experiment, args)
    except ConfigurationError as e:
        logger.debug("Rejected configuration", exc_info=True)
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    
    return EXIT_OK


def _save_run(results, args) -> None:
    if args.results_dir:
        for path in GAReporter(args.results_dir).save_results(results):
            logger.info(f"Saved {path}")
    if args.plots_dir:
        from .visualization import GAVisualizer
        for path in GAVisualizer(args.plots_dir).generate_all_plots(results):
            logger.info(f"Saved {path}")


def _save_experiment(experiment, args) -> None:
    if args.results_dir:
        for path in GAReporter(args.results_dir).save_experiment(experiment):
            logger.info(f"Saved {path}")
    if args.plots_dir:
        from .visualization import GAVisualizer
        for path in GAVisualizer(args.plots_dir).generate_experiment_plots(experiment):
            logger.info(f"Saved {path}")


if __name__ == "__main__":
    sys.exit(main())
