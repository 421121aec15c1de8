"""Pure string canonicalisation for configured paths.

Nothing in this module touches the filesystem. ``normalize`` handles
separator conversion and trailing-separator trimming, ``collapse`` resolves
``.``/``..`` segments and redundant separators the way ``realpath`` would,
except that the target does not need to exist.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_ANY_SEPARATOR = re.compile(r"[/\\]")
_TRAILING_SEPARATORS = re.compile(r"[/\\]+$")
_ROOT = re.compile(r"^([A-Za-z]:/|//[^/]+/)(.*)$", re.DOTALL)
_NEEDS_COLLAPSE = re.compile(r"(?:^|/)\.{1,2}(?:/|$)|/{2,}")


def normalize(path: str, separator: str | None = None, trim: bool = False) -> str:
    """Convert separators to ``separator`` and optionally trim trailing ones.

    A ``separator`` of ``None`` leaves separators untouched.
    """

    if separator is not None:
        path = _ANY_SEPARATOR.sub(lambda _: separator, path)

    if trim:
        trimmed = _TRAILING_SEPARATORS.sub("", path)
        # a bare root stays a root
        path = trimmed if trimmed or not path else path[0]

    return path


def needs_collapse(path: str) -> bool:
    """Return True when ``path`` has dot segments or repeated separators."""
    return bool(_NEEDS_COLLAPSE.search(path.replace("\\", "/")))


def collapse(path: str, separator: str = "/") -> str:
    """Resolve dot segments and redundant separators in ``path``.

    Drive letters (``C:/``) and UNC hosts (``//host/``) are kept as an
    untouchable root. Excess ``..`` segments are dropped rather than
    escaping above the root. Leading and trailing separators of the input
    survive. Paths with nothing to collapse are returned unchanged.
    """

    source = path.replace("\\", "/")
    if not needs_collapse(source):
        return path

    root = ""
    remainder = source
    match = _ROOT.match(source)
    if match:
        root, remainder = match.group(1), match.group(2)

    segments: list[str] = []
    for segment in remainder.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    output = root + "/".join(segments)
    if not root and source.startswith("/"):
        output = "/" + output
    if source.endswith("/") and not output.endswith("/"):
        output += "/"

    if separator == "\\":
        output = output.replace("/", "\\")
    return output


def detect_separator(values: Iterable[str], default: str) -> str:
    """Return the first ``/`` or ``\\`` found across ``values``, else ``default``."""

    for value in values:
        match = _ANY_SEPARATOR.search(value)
        if match:
            return match.group(0)
    return default


__all__ = ["collapse", "detect_separator", "needs_collapse", "normalize"]
