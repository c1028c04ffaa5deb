"""gstconf utilities - logging and environment helpers."""

from gstconf.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from gstconf.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "get_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
