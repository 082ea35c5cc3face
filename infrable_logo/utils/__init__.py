"""
Infrable Logo - Utilities Package
=================================
This package contains logging and configuration helpers.
"""

from infrable_logo.utils.logger import (
    JsonFormatter, setup_logger, get_logger, log_exception
)
from infrable_logo.utils.io import (
    ConfigError, load_config, merge_configs
)

__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'log_exception',
    'ConfigError', 'load_config', 'merge_configs'
]
