from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

import yaml

from pathconf.config import ResolverOptions
from pathconf.resolver import PathResolver

SAMPLE_PATHS: dict[str, str] = {
    "config": "support/config/",
    "views": "resources/views",
}


def write_paths_file(folder: Path, paths: Mapping[str, str], *, name: str = "paths.yaml") -> Path:
    """Write ``paths`` into ``folder`` using the format implied by ``name``."""

    folder.mkdir(parents=True, exist_ok=True)
    dest = folder / name
    if dest.suffix == ".json":
        dest.write_text(json.dumps(dict(paths)), encoding="utf-8")
    elif dest.suffix == ".toml":
        lines = [f'"{key}" = {json.dumps(value)}' for key, value in paths.items()]
        dest.write_text("\n".join(lines) + "\n", encoding="utf-8")
    else:
        dest.write_text(yaml.safe_dump(dict(paths), sort_keys=False), encoding="utf-8")
    return dest


def make_app(root: Path, paths: Mapping[str, str] = SAMPLE_PATHS, *, create_dirs: bool = False) -> Path:
    """Create an application folder with a paths file and optional subfolders."""

    app = root / "app"
    write_paths_file(app, paths)
    if create_dirs:
        for value in paths.values():
            (app / value).mkdir(parents=True, exist_ok=True)
    return app


def posix_resolver(**options: object) -> PathResolver:
    """Return a resolver whose native separator is ``/`` on every platform."""

    return PathResolver(ResolverOptions(separator="/", **options))
