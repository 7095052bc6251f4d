#!/usr/bin/env python3
"""
Base Reporter Module

Common utilities and base class for the reporting modules.
Provides shared file handling and JSON/CSV output.
"""

import json
import pandas as pd
import numpy as np
from pathlib import Path
from datetime import datetime
from typing import Dict, Any
from abc import ABC, abstractmethod


class NumpyEncoder(json.JSONEncoder):
    """Custom JSON encoder for numpy types"""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


class BaseReporter(ABC):
    """
    Base class for all reporters with common reporting utilities
    """
    
    def __init__(self, results_dir: Path):
        """
        Initialize base reporter
        
        Args:
            results_dir: Directory to save reports and results
        """
        self.results_dir = Path(results_dir)
        self.results_dir.mkdir(parents=True, exist_ok=True)
    
    def _timestamped(self, filename: str, suffix: str, timestamp: bool) -> Path:
        if timestamp:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{filename}_{ts}"
        return self.results_dir / f"{filename}{suffix}"
    
    def save_json_results(self, data: Dict[str, Any], filename: str, 
                         timestamp: bool = True) -> Path:
        """
        Save results as JSON file
        
        Args:
            data: Data to save
            filename: Base filename
            timestamp: Whether to add timestamp to filename
            
        Returns:
            Path to saved file
        """
        filepath = self._timestamped(filename, '.json', timestamp)
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)
        
        return filepath
    
    def save_csv_summary(self, df: pd.DataFrame, filename: str, 
                        timestamp: bool = True) -> Path:
        """
        Save DataFrame as CSV file
        
        Args:
            df: DataFrame to save
            filename: Base filename
            timestamp: Whether to add timestamp to filename
            
        Returns:
            Path to saved file
        """
        filepath = self._timestamped(filename, '.csv', timestamp)
        df.to_csv(filepath, index=False)
        
        return filepath
    
    @abstractmethod
    def save_results(self, *args, **kwargs):
        """Save the main results (to be implemented by subclasses)"""
        pass
