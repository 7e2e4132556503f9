"""
GoPages — Import suffix resolution.

Turns a module path and the imports seen while listing it into the list of
sub-package paths that need their own redirect page.
"""

from __future__ import annotations

from typing import Iterable

from gopages.pages.prefix import is_under, parse_import_path

# The module root page. Never produced by resolve_import_suffixes; callers
# append it themselves.
ROOT_SUFFIX = ""


def _strip_module_path(import_path: str, module_path: str) -> str:
    """
    Cut the module path off an import that is_under() accepted.

    Slices the normalised paths rather than removing the literal module path
    text, so "example.com/repo/./pkg" and "example.com/repo/pkg/" both give
    "pkg" (a literal strip would leave "/./pkg" and produce a "./pkg" page
    directory). The suffix always names the same directory the page lands in.
    """
    prefix_path = parse_import_path(module_path).path.rstrip("/")
    suffix = parse_import_path(import_path).path[len(prefix_path):]
    return suffix[1:] if suffix.startswith("/") else suffix


def resolve_import_suffixes(module_path: str, imports: Iterable[str]) -> list[str]:
    """
    Return the import suffixes local to `module_path`, in input order.

    Imports equal to the module path produce an empty suffix and are dropped.
    Duplicates are kept: writing the same page twice is harmless.
    """
    if not module_path:
        return []

    suffixes: list[str] = []
    for import_path in imports:
        if not is_under(import_path, module_path):
            continue
        suffix = _strip_module_path(import_path, module_path)
        if suffix:
            suffixes.append(suffix)
    return suffixes
