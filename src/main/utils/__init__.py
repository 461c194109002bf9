from .config_loader import load_configs, load_layered_config
from .config import ConfigError, MissingConfigError, InvalidConfigError, require, ensure_keys
from .io_utils import ImageIOError, ensure_dir, file_exists, read_image, save_image, render_histogram
__all__ = [
    "load_configs",
    "load_layered_config",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "require",
    "ensure_keys",
    "ImageIOError",
    "ensure_dir",
    "file_exists",
    "read_image",
    "save_image",
    "render_histogram",
]
