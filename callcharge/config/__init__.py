"""
Configuration module for the call charge system.
"""
from .logging_config import LoggingConfig, configure_logging, reset_logging
from .settings import CallChargeConfig, get_config, load_config, reload_config

__all__ = [
    'CallChargeConfig',
    'LoggingConfig',
    'configure_logging',
    'get_config',
    'load_config',
    'reload_config',
    'reset_logging',
]
