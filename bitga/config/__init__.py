"""Configuration module"""

from .ga_config import GAConfig

__all__ = ['GAConfig']
