"""Include/exclude root matching for document paths.

Roots are free-text user settings, so they are normalized at match time
rather than validated up front. A root that normalizes to an empty string
never matches anything.

Matching is case-sensitive and only understands ``/`` as a separator.
"""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "/"


def normalize_root(root: str) -> str:
    """Trim whitespace and strip surrounding separators from ``root``.

    Repeats until stable so that ``normalize_root`` is idempotent even for
    input such as ``" / Notes / "``.
    """
    previous = None
    while root != previous:
        previous = root
        root = root.strip().strip(SEPARATOR)
    return root


def normalize_path(path: str) -> str:
    """Strip leading separators; trailing ones are kept."""
    return path.lstrip(SEPARATOR)


def matches_root(path: str, root: str) -> bool:
    """Return True when ``path`` is ``root`` itself or lies inside it.

    ``Questions/Foo.md`` matches ``Questions`` but ``QuestionsArchive/Foo.md``
    does not.
    """
    normalized = normalize_root(root)
    if not normalized:
        return False

    rel = normalize_path(path)
    return rel == normalized or rel.startswith(normalized + SEPARATOR)


def _matches_any(path: str, roots: Iterable[str]) -> bool:
    return any(matches_root(path, root) for root in roots)


def is_enabled(
    path: str,
    include_roots: Iterable[str] | None,
    exclude_roots: Iterable[str] | None,
) -> bool:
    """Decide whether heading tracking applies to ``path``.

    An empty include list admits every path. Exclude roots always win over
    include roots.
    """
    rel = normalize_path(path)
    includes = list(include_roots or ())
    excludes = list(exclude_roots or ())

    if includes and not _matches_any(rel, includes):
        return False

    if excludes and _matches_any(rel, excludes):
        return False

    return True


__all__ = [
    "SEPARATOR",
    "is_enabled",
    "matches_root",
    "normalize_path",
    "normalize_root",
]
