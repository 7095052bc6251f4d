"""
Logging utilities

Configures the ``bitga`` loggers for console and optional file output.
"""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str, log_file: Optional[str] = None,
                 level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Set up a logger with console and optional file output
    
    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level (number or name such as "DEBUG")
        
    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")
    
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Reconfiguring replaces the previous handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    
    formatter = logging.Formatter(LOG_FORMAT)
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger
