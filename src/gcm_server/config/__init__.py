from .errors import ConfigError
from .loader import load_config
from .models import AppConfig, MessageDefaults

__all__ = [
    "AppConfig",
    "ConfigError",
    "MessageDefaults",
    "load_config",
]
