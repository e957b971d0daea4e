"""Configuration package with clean public API."""

from .schemas import AppConfig, LoggingConfig, RepositoryConfig
from .manager import ConfigurationManager, expand_env_vars

__all__ = [
    'AppConfig',
    'LoggingConfig',
    'RepositoryConfig',
    'ConfigurationManager',
    'expand_env_vars',
]
