"""
Configuration module for the time ledger.
"""
from .settings import TimeLedgerConfig, get_config, load_config, reload_config

__all__ = [
    'TimeLedgerConfig',
    'get_config',
    'load_config',
    'reload_config'
]
