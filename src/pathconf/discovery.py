"""Base path discovery by walking up from a starting directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pathconf.errors import ConfigNotFound, InvalidBasePath

MARKER_FILENAMES: tuple[str, ...] = ("paths.yaml", "paths.yml", "paths.toml", "paths.json")
PACKAGE_DIR = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)


def find_marker(directory: Path, markers: Iterable[str] = MARKER_FILENAMES) -> Path | None:
    """Return the first marker file present in ``directory``, if any."""

    for marker in markers:
        candidate = directory / marker
        if candidate.is_file():
            return candidate
    return None


def find_base_path(
    start: str | Path | None = None,
    markers: Iterable[str] = MARKER_FILENAMES,
) -> Path:
    """Locate the application base by searching the ancestors of ``start``.

    Parameters
    ----------
    start:
        Directory to walk up from. Defaults to the installed package
        directory, so an application that vendors pathconf finds the paths
        file in its own root.
    markers:
        Filenames whose presence marks a directory as the base.
    """

    markers = tuple(markers)
    start_path = Path(start).expanduser().resolve() if start is not None else PACKAGE_DIR

    # the walk ends when the parent of a directory is the directory itself
    for candidate in start_path.parents:
        if find_marker(candidate, markers) is not None:
            logger.info("Discovered base path %s", candidate)
            return candidate

    raise ConfigNotFound(
        f"No paths configuration file ({', '.join(markers)}) was found in any parent of {start_path}"
    )


def require_directory(path: str | Path) -> Path:
    """Return ``path`` as a ``Path``, raising if it is not an existing directory."""

    if not str(path):
        raise InvalidBasePath("The base path is empty")
    candidate = Path(path)
    if not candidate.is_dir():
        raise InvalidBasePath(f"The base path {path} does not exist or is not a directory")
    return candidate


__all__ = ["MARKER_FILENAMES", "PACKAGE_DIR", "find_base_path", "find_marker", "require_directory"]
