"""
Reporting package for GA runs
"""

from .base_reporter import BaseReporter
from .ga_reporter import ConsoleReporter, GAReporter

__all__ = ['BaseReporter', 'ConsoleReporter', 'GAReporter']
