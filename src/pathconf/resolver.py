"""The path resolver: a single point of reference for application paths.

A resolver is configured with policy options, loaded once from a paths
configuration file (or an in-memory mapping) and then queried for absolute
paths by logical key::

    resolver = PathResolver().set_trim_trailing_separators(True).load()
    resolver.get("views", "home.tpl")

Mutators are serialised by a re-entrant lock. ``get`` and ``all`` take no
lock, so they are safe to call from many threads once loading is finished.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pathconf.canonical import collapse, detect_separator, normalize
from pathconf.config.loader import locate_config, read_paths_file, validate_paths
from pathconf.config.models import ResolverOptions
from pathconf.discovery import find_base_path, require_directory
from pathconf.errors import FrozenOption

BASE_KEY = "base"
BASE_PATH_ENV = "PATHCONF_BASE_PATH"
NOT_FOUND = None

ConvertSeparators = Union[bool, str]
PathSource = Union[str, Path, Mapping[str, str], None]

logger = logging.getLogger(__name__)


class PathResolver:
    """Resolve logical path keys against an application base path."""

    def __init__(
        self,
        options: ResolverOptions | None = None,
        *,
        exists: Callable[[str], bool] = os.path.exists,
        discovery_start: str | Path | None = None,
    ) -> None:
        self.options = options.model_copy() if options is not None else ResolverOptions()
        self._native_separator = self.options.separator
        self._exists = exists
        self._discovery_start = discovery_start
        self._paths: dict[str, str] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_env(cls, **kwargs: Any) -> "PathResolver":
        """Build a resolver whose base path comes from ``PATHCONF_BASE_PATH``."""

        resolver = cls(**kwargs)
        base = os.getenv(BASE_PATH_ENV)
        if base:
            resolver.set_base_path(base)
        return resolver

    # properties

    @property
    def base_path(self) -> str:
        return self.options.base_path or ""

    @property
    def separator(self) -> str:
        return self.options.separator

    @property
    def loaded(self) -> bool:
        return bool(self._paths)

    # options

    def set_base_path(self, value: str | Path) -> "PathResolver":
        with self._lock:
            self._check_unfrozen("base_path")
            self.options.base_path = str(Path(value).expanduser().absolute()) if str(value) else ""
        return self

    def set_convert_separators(self, value: ConvertSeparators) -> "PathResolver":
        with self._lock:
            self._check_unfrozen("convert_separators")
            self.options.convert_separators = value
            self.options.separator = self._native_separator
        return self

    def set_trim_trailing_separators(self, value: bool) -> "PathResolver":
        with self._lock:
            self._check_unfrozen("trim_trailing_separators")
            self.options.trim_trailing_separators = value
        return self

    def set_verify_existence(self, value: bool) -> "PathResolver":
        with self._lock:
            self.options.verify_existence = value
        return self

    def set_allow_overwrite(self, value: bool) -> "PathResolver":
        with self._lock:
            self.options.allow_overwrite = value
        return self

    def option(self, name: str, value: Any) -> "PathResolver":
        """Set a single option by name.

        Accepts ``base_path``, ``convert_separators``,
        ``trim_trailing_separators``, ``verify_existence`` and
        ``allow_overwrite``, in snake_case or camelCase.
        """

        setter = _OPTION_SETTERS.get(name) or _OPTION_SETTERS.get(_snake_case(name))
        if setter is None:
            raise ValueError(f"Unknown option {name!r}; expected one of {', '.join(_SETTER_NAMES)}.")
        return setter(self, value)

    # loading

    def load(self, source: PathSource = None) -> "PathResolver":
        """Discover the base path if needed, then ingest a paths source.

        ``source`` may be a mapping, a paths file, a folder holding one, or a
        path relative to the base. ``None`` loads the paths file in the base
        folder.
        """

        with self._lock:
            base = self.base_path or str(find_base_path(self._discovery_start))
            require_directory(base)

            if isinstance(source, Mapping):
                paths = validate_paths(source)
            else:
                config = locate_config(base, source)
                logger.info("Loading paths from %s", config)
                paths = read_paths_file(config)

            self.options.base_path = base

            # separator and base are frozen once any path is stored
            if not self._paths:
                if self.options.convert_separators == "auto":
                    self.options.separator = detect_separator(paths.values(), self._native_separator)
                    logger.debug("Detected separator %r from configuration", self.separator)

                if self.options.convert_separators:
                    self.options.base_path = self.normalize(self.base_path)

            for key, value in paths.items():
                self.set(key, value)

        return self

    def set(self, key: str, value: str) -> bool:
        """Register ``value`` under ``key``, returning False when skipped."""

        with self._lock:
            if key == BASE_KEY:
                logger.debug("Ignoring attempt to set the reserved %r key", BASE_KEY)
                return False
            if key in self._paths and not self.options.allow_overwrite:
                logger.debug("Keeping existing value for %r", key)
                return False
            self._paths[key] = self.normalize(value)
            return True

    # queries

    def get(self, key: str = "", suffix: str = "") -> Optional[str]:
        """Return the absolute path for ``key``, with ``suffix`` appended.

        Keys that were never registered are treated as paths relative to
        the base. Returns ``NOT_FOUND`` when existence checks are enabled
        and the path is missing.
        """

        if key + suffix in ("", BASE_KEY):
            return self.base_path

        relative = self._paths.get(key, key)
        if suffix:
            relative = relative + self.separator + suffix
        return self._make(relative)

    def all(self, full: bool = True) -> dict[str, Optional[str]]:
        """Return every key, including ``base``, with full or relative values."""

        paths: dict[str, Optional[str]] = {BASE_KEY: self.base_path}
        for key, value in list(self._paths.items()):
            paths[key] = self._make(value) if full else value
        return paths

    def normalize(self, path: str) -> str:
        """Apply the separator and trimming policy to ``path``."""

        separator = self.separator if self.options.convert_separators else None
        return normalize(path, separator, self.options.trim_trailing_separators)

    # helpers

    def _make(self, path: str) -> Optional[str]:
        base = self.base_path
        if base.endswith(("/", "\\")):
            return self._real(base + path)
        return self._real(base + self.separator + path)

    def _real(self, path: str) -> Optional[str]:
        output = collapse(path, self.separator)
        if self.options.verify_existence and not self._exists(output):
            return NOT_FOUND
        return output

    def _check_unfrozen(self, name: str) -> None:
        if self._paths:
            raise FrozenOption(f'Option "{name}" cannot be changed once paths are loaded')


_OPTION_SETTERS: dict[str, Callable[[PathResolver, Any], PathResolver]] = {
    "base_path": PathResolver.set_base_path,
    "convert_separators": PathResolver.set_convert_separators,
    "trim_trailing_separators": PathResolver.set_trim_trailing_separators,
    "verify_existence": PathResolver.set_verify_existence,
    "allow_overwrite": PathResolver.set_allow_overwrite,
}
_SETTER_NAMES = tuple(_OPTION_SETTERS)


def _snake_case(name: str) -> str:
    return "".join(f"_{char.lower()}" if char.isupper() else char for char in name).lstrip("_")


_instance: PathResolver | None = None
_instance_lock = threading.Lock()


def instance() -> PathResolver:
    """Return the process-wide resolver, creating it on first use."""

    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = PathResolver()
    return _instance


def path(key: str = "", suffix: str = "") -> Optional[str]:
    """Shortcut for ``instance().get(key, suffix)``."""
    return instance().get(key, suffix)


__all__ = ["BASE_KEY", "BASE_PATH_ENV", "NOT_FOUND", "PathResolver", "instance", "path"]
