"""
GoPages — Host-aware path prefix matching for Go import paths.

Import paths look like URLs without a scheme (`example.com/org/repo/pkg`).
They are split on the first "/" into host and path instead of going through
a general URL parser, so percent-encoding, query strings and ports never
change the outcome.
"""

from __future__ import annotations

import posixpath
from typing import NamedTuple


class ImportLocation(NamedTuple):
    host: str
    path: str  # always absolute and normalised, "/" for a bare host


def parse_import_path(value: str) -> ImportLocation:
    """
    Split an import path into (host, normalised path).

    >>> parse_import_path("Example.com/a/./b/")
    ImportLocation(host='example.com', path='/a/b')
    """
    host, _, rest = value.partition("/")
    path = posixpath.normpath("/" + rest.lstrip("/"))
    return ImportLocation(host=host.lower(), path=path)


def is_under(target: str, prefix: str) -> bool:
    """
    Return True when `target` is `prefix` itself or lies below it.

    Matching is per path segment: `example.com/repo/v2` is under
    `example.com/repo`, `example.com/repo-extended` is not.
    """
    target_loc = parse_import_path(target)
    prefix_loc = parse_import_path(prefix)

    if target_loc.host != prefix_loc.host:
        return False

    if prefix_loc.path == "/":
        return True

    return (
        target_loc.path == prefix_loc.path
        or target_loc.path.startswith(prefix_loc.path + "/")
    )
