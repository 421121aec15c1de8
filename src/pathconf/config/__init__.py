"""Configuration models and loaders for pathconf."""

from .loader import (
    ConfigError,
    PRESETS,
    dump_example_config,
    load_options,
    locate_config,
    read_paths_file,
    validate_paths,
)
from .models import PathMap, ResolverOptions

__all__ = [
    "ConfigError",
    "PRESETS",
    "PathMap",
    "ResolverOptions",
    "dump_example_config",
    "load_options",
    "locate_config",
    "read_paths_file",
    "validate_paths",
]
