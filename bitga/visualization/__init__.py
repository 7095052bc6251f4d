"""
Visualization package for GA runs
"""

from .base_visualizer import BaseVisualizer
from .ga_visualizer import GAVisualizer

__all__ = ['BaseVisualizer', 'GAVisualizer']
