#!/usr/bin/env python3
"""
GA Reporter Module

Console and file reporting for Genetic Algorithm runs.
"""

import sys
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List, Optional, TextIO

from ..genetic import Individual
from .base_reporter import BaseReporter


class ConsoleReporter:
    """
    Prints the per-generation best individual and the final best-so-far
    """
    
    def __init__(self, stream: Optional[TextIO] = None, show_generations: bool = True):
        """
        Args:
            stream: Output stream, stdout when omitted
            show_generations: Print one line per generation
        """
        self.stream = stream
        self.show_generations = show_generations
    
    def _write(self, text: str) -> None:
        print(text, file=self.stream if self.stream is not None else sys.stdout)
    
    def report_generation(self, generation: int, individual: Individual) -> None:
        """Per-generation callback for GeneticAlgorithm"""
        if self.show_generations:
            self._write(f"Generation {generation}: Best combination: "
                        f"{individual.to_bitstring()}  Error: {individual.error}")
    
    def report_final(self, results: Dict[str, Any]) -> None:
        """Print the best individual of the whole run"""
        self._write("")
        self._write(f"Best combination found: {results['best_individual']['genome']}")
        self._write(f"Error: {results['best_error']}")
        self._write(f"Found at generation: {results['best_generation']}")
    
    def report_experiment(self, summary: Dict[str, Any]) -> None:
        """Print the statistics of a multi-run experiment"""
        self._write("")
        self._write("=" * 60)
        self._write(f"EXPERIMENT SUMMARY ({summary['num_runs']} runs)")
        self._write("=" * 60)
        self._write(f"Success rate:        {summary['success_rate']:.1%}")
        self._write(f"Best error:          mean={summary['best_error']['mean']:.2f} "
                    f"std={summary['best_error']['std']:.2f} "
                    f"min={summary['best_error']['min']} max={summary['best_error']['max']}")
        mean_generations = summary['generations_to_solution']['mean']
        if mean_generations is None:
            self._write("Generations to solution: no run reached error 0")
        else:
            self._write(f"Generations to solution: mean={mean_generations:.1f}")


class GAReporter(BaseReporter):
    """
    Writes Genetic Algorithm results to JSON and CSV files
    """
    
    def __init__(self, results_dir: Path, timestamp: bool = True):
        """
        Initialize GA reporter
        
        Args:
            results_dir: Directory to save reports
            timestamp: Whether file names get a timestamp suffix
        """
        super().__init__(results_dir)
        self.timestamp = timestamp
    
    @staticmethod
    def history_frame(results: Dict[str, Any]) -> pd.DataFrame:
        """Per-generation history of one run as a DataFrame"""
        return pd.DataFrame({
            'generation': range(1, len(results['best_error_history']) + 1),
            'best_error': results['best_error_history'],
            'mean_error': results['mean_error_history'],
            'diversity': results['diversity_history'],
        })
    
    def save_results(self, results: Dict[str, Any], name: str = "ga_run") -> List[Path]:
        """
        Save a single run
        
        Args:
            results: Results dictionary returned by GeneticAlgorithm.run
            name: Base file name
            
        Returns:
            List of paths to saved files
        """
        saved_files = [
            self.save_json_results(results, f"{name}_results", self.timestamp),
            self.save_csv_summary(self.history_frame(results), f"{name}_history", self.timestamp),
        ]
        return saved_files
    
    def save_experiment(self, experiment: Dict[str, Any], name: str = "ga_experiment") -> List[Path]:
        """
        Save a multi-run experiment
        
        Args:
            experiment: Dictionary returned by ExperimentRunner.run
            name: Base file name
            
        Returns:
            List of paths to saved files
        """
        saved_files = [self.save_json_results(experiment, f"{name}_results", self.timestamp)]
        
        rows = [{
            'run_id': run['run_id'],
            'seed': run['seed'],
            'best_error': run['best_error'],
            'best_generation': run['best_generation'],
            'generations_run': run['generations_run'],
            'success': run['success'],
            'best_genome': run['best_individual']['genome'],
        } for run in experiment['runs']]
        saved_files.append(self.save_csv_summary(pd.DataFrame(rows), f"{name}_runs", self.timestamp))
        
        return saved_files
