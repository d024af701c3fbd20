"""Core types: results, exit codes and configuration."""

from .config import Config, ConfigError, LayoutConfig, PathsConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "LayoutConfig",
    "PathsConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
