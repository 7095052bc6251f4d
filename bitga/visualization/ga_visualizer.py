#!/usr/bin/env python3
"""
GA Visualizer Module

Evolution curves for single runs and outcome plots for multi-run experiments.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List
from .base_visualizer import BaseVisualizer


class GAVisualizer(BaseVisualizer):
    """
    Visualizer for Genetic Algorithm results
    """
    
    def generate_all_plots(self, results: Dict[str, Any]) -> List[Path]:
        """
        Generate the plots for one run
        
        Args:
            results: Results dictionary returned by GeneticAlgorithm.run
        """
        return [
            self.plot_evolution_curve(results),
            self.plot_diversity_curve(results),
        ]
    
    def generate_experiment_plots(self, experiment: Dict[str, Any]) -> List[Path]:
        """
        Generate the plots for a multi-run experiment
        
        Args:
            experiment: Dictionary returned by ExperimentRunner.run
        """
        return [
            self.plot_mean_evolution_curve(experiment),
            self.plot_generations_to_solution(experiment),
        ]
    
    def plot_evolution_curve(self, results: Dict[str, Any], filename: str = 'evolution_curve.png') -> Path:
        """Plot best and mean error per generation"""
        generations = np.arange(1, len(results['best_error_history']) + 1)
        
        plt.figure(figsize=(10, 6))
        plt.plot(generations, results['best_error_history'], linewidth=2, label='Best Error')
        plt.plot(generations, results['mean_error_history'], linewidth=1.5, linestyle='--', label='Mean Error')
        plt.axvline(results['best_generation'], color='gray', alpha=0.5, linestyle=':',
                    label=f"Best found (gen {results['best_generation']})")
        plt.title(f"Evolution Curve - best error {results['best_error']}")
        plt.xlabel('Generation')
        plt.ylabel('Error (Lower is Better)')
        self.setup_grid(plt.gca())
        plt.legend()
        
        plt.tight_layout()
        return self.save_plot(filename)
    
    def plot_diversity_curve(self, results: Dict[str, Any], filename: str = 'diversity_curve.png') -> Path:
        """Plot normalized population diversity per generation"""
        generations = np.arange(1, len(results['diversity_history']) + 1)
        
        plt.figure(figsize=(10, 6))
        plt.plot(generations, results['diversity_history'], linewidth=2, color='green')
        plt.title('Population Diversity (mean normalized Hamming distance)')
        plt.xlabel('Generation')
        plt.ylabel('Diversity')
        plt.ylim(0, 1)
        self.setup_grid(plt.gca())
        
        plt.tight_layout()
        return self.save_plot(filename)
    
    def plot_mean_evolution_curve(self, experiment: Dict[str, Any],
                                  filename: str = 'mean_evolution_curve.png') -> Path:
        """Plot the best-error curve of every run and their mean"""
        histories = [run['best_error_history'] for run in experiment['runs']]
        
        # Runs that stopped early keep their last value
        max_length = max(len(history) for history in histories)
        padded = np.array([history + [history[-1]] * (max_length - len(history)) for history in histories])
        generations = np.arange(1, max_length + 1)
        
        plt.figure(figsize=(10, 6))
        for row in padded:
            plt.plot(generations, row, color='gray', alpha=0.25, linewidth=1)
        plt.plot(generations, padded.mean(axis=0), linewidth=2, color='blue', label='Mean Best Error')
        plt.title(f"Evolution Curves - {len(histories)} runs")
        plt.xlabel('Generation')
        plt.ylabel('Best Error (Lower is Better)')
        self.setup_grid(plt.gca())
        plt.legend()
        
        plt.tight_layout()
        return self.save_plot(filename)
    
    def plot_generations_to_solution(self, experiment: Dict[str, Any],
                                     filename: str = 'generations_to_solution.png') -> Path:
        """Histogram of the generation at which each run found its best individual"""
        df = pd.DataFrame([{
            'best_generation': run['best_generation'],
            'outcome': 'solved' if run['success'] else 'unsolved',
        } for run in experiment['runs']])
        
        fig, ax = plt.subplots(figsize=(10, 6))
        fig.suptitle('Generation of Best Individual per Run', fontsize=16)
        for outcome, group in df.groupby('outcome'):
            ax.hist(group['best_generation'], bins=min(20, max(1, len(group))), alpha=0.7, label=outcome)
        ax.set_xlabel('Generation')
        ax.set_ylabel('Runs')
        self.setup_grid(ax)
        ax.legend()
        
        return self.save_plot(filename)
