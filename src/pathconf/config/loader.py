"""Locating, reading and templating paths configuration files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from pathconf.discovery import MARKER_FILENAMES
from pathconf.errors import ConfigNotFound, PathConfigError

from .models import PathMap, ResolverOptions

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
PRESETS: tuple[str, ...] = ("default", "laravel50", "laravel51", "lumen50")


class ConfigError(PathConfigError):
    """Raised when configuration files cannot be read or validated."""


def locate_config(base: str | Path, path: str | Path | None = None) -> Path:
    """Resolve ``path`` to a concrete paths file.

    An existing file is used as is and an existing directory is searched for
    a marker file. Anything else is taken relative to ``base``: either as
    the paths file itself (when it is named like one) or as the folder
    holding it.
    """

    attempted: list[Path] = []

    if path is not None and str(path):
        candidate = Path(path).expanduser()
        if candidate.is_file():
            return candidate.resolve()
        if candidate.is_dir():
            found = _marker_in(candidate, attempted)
            if found is not None:
                return found
            raise ConfigNotFound(
                f"Config path {path} does not contain a paths file (tried: {_join(attempted)})"
            )
        if candidate.name in MARKER_FILENAMES:
            target = Path(base) / candidate
            if target.is_file():
                return target.resolve()
            attempted.append(target)
            raise ConfigNotFound(f"Config path {target} doesn't resolve to a configuration file")
        folder = Path(base) / candidate
    else:
        folder = Path(base)

    found = _marker_in(folder, attempted)
    if found is None:
        raise ConfigNotFound(
            f"Config path {folder} doesn't resolve to a configuration file (tried: {_join(attempted)})"
        )
    return found


def read_paths_file(path: Path) -> dict[str, str]:
    """Return the key to relative path mapping stored in ``path``."""

    payload = _read_structured_file(path)
    return validate_paths(payload, source=path)


def validate_paths(payload: Any, *, source: Path | str = "<mapping>") -> dict[str, str]:
    """Check that ``payload`` is a flat string-to-string mapping."""

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    try:
        return dict(PathMap.model_validate(dict(payload)).root)
    except ValidationError as exc:
        raise ConfigError(f"Paths in {source} must map strings to strings: {exc}") from exc


def load_options(path: Path) -> ResolverOptions:
    """Load resolver options from a YAML/TOML/JSON file.

    The options may sit at the top level or under an ``options`` key.
    """

    payload = _read_structured_file(path)
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {path}, got {type(payload)!r}.")
    data = payload.get("options", payload)
    try:
        return ResolverOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid resolver options in {path}: {exc}") from exc


def dump_example_config(dest: Path, *, preset: str = "default") -> None:
    """Write a bundled paths template to ``dest``."""

    if preset not in PRESETS:
        raise ConfigError(f"Unknown preset {preset!r}; choose one of {', '.join(PRESETS)}.")

    template = TEMPLATES_DIR / f"{preset}.yaml"
    suffix = dest.suffix.lower()
    if suffix == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        merged = _read_structured_file(template)
        dest.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        return
    # keep the template comments for YAML destinations
    dest.write_text(template.read_text(encoding="utf-8"), encoding="utf-8")


def _marker_in(folder: Path, attempted: list[Path]) -> Path | None:
    for marker in MARKER_FILENAMES:
        candidate = folder / marker
        if candidate.is_file():
            return candidate.resolve()
        attempted.append(candidate)
    return None


def _join(paths: list[Path]) -> str:
    return ", ".join(str(p) for p in paths)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    raise ConfigError(f"Unsupported config format for {path}")


__all__ = [
    "ConfigError",
    "PRESETS",
    "TEMPLATES_DIR",
    "dump_example_config",
    "load_options",
    "locate_config",
    "read_paths_file",
    "validate_paths",
]
