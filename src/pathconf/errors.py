"""Exception hierarchy for path configuration failures."""

from __future__ import annotations


class PathConfigError(RuntimeError):
    """Base class for every error raised by pathconf."""


class ConfigNotFound(PathConfigError):
    """Raised when no paths configuration file can be located."""


class InvalidBasePath(PathConfigError):
    """Raised when the base path is missing or is not a directory."""


class FrozenOption(PathConfigError, ValueError):
    """Raised when a separator-affecting option changes after paths were loaded."""


__all__ = ["ConfigNotFound", "FrozenOption", "InvalidBasePath", "PathConfigError"]
