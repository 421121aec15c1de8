"""Thin host-framework adapter delegating to a path provider."""

from __future__ import annotations

import os
from typing import Literal, Optional, Protocol, runtime_checkable


@runtime_checkable
class PathProvider(Protocol):
    """Objects that can resolve a logical key to an absolute path."""

    def get(self, key: str = "", suffix: str = "") -> Optional[str]:
        """Return the path for ``key`` with ``suffix`` appended."""
        ...

    def set(self, key: str, value: str) -> bool:
        """Register a relative path under ``key``."""
        ...


class ApplicationPaths:
    """Framework-style path getters backed by a ``PathProvider``.

    ``cache_layout`` selects where compiled caches live: ``"bootstrap"``
    keeps them under ``bootstrap/cache``, ``"vendor"`` writes them into the
    vendor folder when it is writable and falls back to
    ``storage/framework`` otherwise.
    """

    def __init__(
        self,
        provider: PathProvider,
        *,
        cache_layout: Literal["bootstrap", "vendor"] = "bootstrap",
    ) -> None:
        if cache_layout not in ("bootstrap", "vendor"):
            raise ValueError(f"Unknown cache layout {cache_layout!r}.")
        self.provider = provider
        self.cache_layout = cache_layout

    def path(self, key: str = "", suffix: str = "") -> Optional[str]:
        return self.provider.get(key, suffix)

    def base_path(self) -> Optional[str]:
        return self.provider.get()

    def app_path(self) -> Optional[str]:
        return self.provider.get("app")

    def config_path(self) -> Optional[str]:
        return self.provider.get("config")

    def database_path(self) -> Optional[str]:
        return self.provider.get("database")

    def lang_path(self) -> Optional[str]:
        return self.provider.get("lang")

    def public_path(self) -> Optional[str]:
        return self.provider.get("public")

    def resource_path(self) -> Optional[str]:
        return self.provider.get("resources")

    def storage_path(self) -> Optional[str]:
        return self.provider.get("storage")

    def bootstrap_path(self) -> Optional[str]:
        return self.provider.get("bootstrap")

    def set_base_path(self, value: str) -> bool:
        # the base is fixed by the paths file; "base" is a reserved key
        return self.provider.set("base", value)

    def use_database_path(self, value: str) -> None:
        raise NotImplementedError("use_database_path is not supported. Use the paths configuration file instead.")

    def use_storage_path(self, value: str) -> None:
        raise NotImplementedError("use_storage_path is not supported. Use the paths configuration file instead.")

    def cached_config_path(self) -> Optional[str]:
        return self._cached("config.php")

    def cached_routes_path(self) -> Optional[str]:
        return self._cached("routes.php")

    def cached_compile_path(self) -> Optional[str]:
        return self._cached("compiled.php")

    def cached_services_path(self) -> Optional[str]:
        if self.cache_layout == "bootstrap":
            return self._cached("services.php")
        return self._cached("services.json")

    def _cached(self, filename: str) -> Optional[str]:
        if self.cache_layout == "bootstrap":
            return self.provider.get("bootstrap", f"cache/{filename}")
        if self._vendor_is_writable():
            return self.provider.get("vendor", filename)
        return self.provider.get("storage", f"framework/{filename}")

    def _vendor_is_writable(self) -> bool:
        vendor = self.provider.get("vendor")
        return bool(vendor) and os.access(vendor, os.W_OK)


__all__ = ["ApplicationPaths", "PathProvider"]
