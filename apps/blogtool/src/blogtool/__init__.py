"""Push a single file to a GitHub repository."""

from .config import ConfigStore, default_config_path, user_config_dir
from .models import Configuration, PushOptions

__all__ = [
    "ConfigStore",
    "Configuration",
    "PushOptions",
    "default_config_path",
    "user_config_dir",
]
