"""
Repeated-run experiments

Runs the same configuration several times with derived seeds and summarizes
how reliably the algorithm reaches a perfect solution.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

import numpy as np

from .algorithms import GeneticAlgorithm, GenerationCallback
from .config import GAConfig
from .exceptions import ConfigurationError
from .utils import time_seed


class ExperimentRunner:
    """
    Experiment runner with statistical summary
    """
    
    def __init__(self, config: GAConfig, num_runs: int = 10,
                 generation_callback: Optional[GenerationCallback] = None):
        """
        Args:
            config: Configuration shared by all runs. Run i uses seed
                config.random_seed + i (clock-derived base when unset)
            num_runs: Number of independent runs
            generation_callback: Passed to every run
        """
        config.validate()
        if num_runs <= 0:
            raise ConfigurationError("Number of runs must be positive", 'num_runs')
        
        self.config = config
        self.num_runs = num_runs
        self.generation_callback = generation_callback
        self.base_seed = config.random_seed if config.random_seed is not None else time_seed()
        self.logger = logging.getLogger(__name__)
    
    def run_single(self, run_id: int) -> Dict[str, Any]:
        """Run one GA execution with the seed derived for ``run_id``"""
        seed = self.base_seed + run_id
        run_config = replace(self.config, random_seed=seed)
        
        ga = GeneticAlgorithm.from_config(run_config, generation_callback=self.generation_callback)
        result = ga.run()
        result['run_id'] = run_id
        result['seed'] = seed
        return result
    
    def run(self) -> Dict[str, Any]:
        """
        Run all repetitions
        
        Returns:
            Dictionary with the per-run results and summary statistics
        """
        self.logger.info(f"Starting experiment: {self.num_runs} runs, base seed {self.base_seed}")
        
        runs = []
        for run_id in range(self.num_runs):
            self.logger.info(f"  Run {run_id + 1}/{self.num_runs}")
            result = self.run_single(run_id)
            runs.append(result)
            self.logger.info(f"    Run {run_id + 1}: Error={result['best_error']}, "
                             f"Found at generation={result['best_generation']}")
        
        summary = self.calculate_statistics(runs)
        self.logger.info(f"Experiment completed: success rate {summary['success_rate']:.1%}, "
                         f"mean best error {summary['best_error']['mean']:.2f}")
        
        return {
            'config': self.config.to_dict(),
            'base_seed': self.base_seed,
            'summary': summary,
            'runs': runs,
        }
    
    @staticmethod
    def calculate_statistics(runs: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Calculate statistics across runs"""
        errors = np.array([run['best_error'] for run in runs])
        generations = np.array([run['generations_run'] for run in runs])
        solved = [run['best_generation'] for run in runs if run['success']]
        
        return {
            'num_runs': len(runs),
            'success_rate': len(solved) / len(runs),
            'best_error': {
                'mean': float(np.mean(errors)),
                'std': float(np.std(errors)),
                'min': int(np.min(errors)),
                'max': int(np.max(errors)),
                'median': float(np.median(errors)),
            },
            'generations_run': {
                'mean': float(np.mean(generations)),
                'max': int(np.max(generations)),
            },
            'generations_to_solution': {
                'mean': float(np.mean(solved)) if solved else None,
                'min': int(np.min(solved)) if solved else None,
                'max': int(np.max(solved)) if solved else None,
            },
        }
