"""Maven-style version ordering.

Versions are split into numeric and qualifier items and compared item by
item, so ``1.10`` sorts after ``1.3`` and ``2.13.0-M5`` before ``2.13.0``.
"""
from __future__ import annotations

import functools
import re
from typing import Iterable, List, Optional, Union

Item = Union[int, str]

_TOKEN_RE = re.compile(r"\d+|[a-z]+")

_QUALIFIER_ALIASES = {
    "a": "alpha",
    "b": "beta",
    "m": "milestone",
    "cr": "rc",
    "ga": "",
    "final": "",
    "release": "",
}

_QUALIFIER_ORDER = ["alpha", "beta", "milestone", "rc", "snapshot", "", "sp"]
_RELEASE_RANK = _QUALIFIER_ORDER.index("")
_UNKNOWN_RANK = len(_QUALIFIER_ORDER)


def _trim(items: List[Item]) -> None:
    while items and items[-1] in (0, ""):
        items.pop()


def _tokenize(version: str) -> List[Item]:
    items: List[Item] = []
    for token in _TOKEN_RE.findall(version.strip().lower()):
        if token.isdigit():
            items.append(int(token))
        else:
            # 2.0.0-RC1 == 2-RC1
            _trim(items)
            items.append(_QUALIFIER_ALIASES.get(token, token))
    # 1.0.0 == 1 and 1.0-final == 1
    _trim(items)
    return items


def _qualifier_rank(qualifier: str) -> int:
    try:
        return _QUALIFIER_ORDER.index(qualifier)
    except ValueError:
        return _UNKNOWN_RANK


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_items(left: Optional[Item], right: Optional[Item]) -> int:
    """Compare two items; None pads the shorter version."""
    if left is None and right is None:
        return 0
    if left is None:
        return -_compare_items(right, left)
    if isinstance(left, int):
        if right is None:
            return _cmp(left, 0)
        if isinstance(right, int):
            return _cmp(left, right)
        return 1  # numbers outrank qualifiers
    if right is None:
        return _cmp(_qualifier_rank(left), _RELEASE_RANK)
    if isinstance(right, int):
        return -1
    left_rank, right_rank = _qualifier_rank(left), _qualifier_rank(right)
    if left_rank == right_rank == _UNKNOWN_RANK:
        return _cmp(left, right)
    return _cmp(left_rank, right_rank)


def compare(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` orders before, equal to, or after ``b``."""
    left, right = _tokenize(a), _tokenize(b)
    for idx in range(max(len(left), len(right))):
        result = _compare_items(
            left[idx] if idx < len(left) else None,
            right[idx] if idx < len(right) else None,
        )
        if result:
            return result
    return 0


def sort_versions(versions: Iterable[str], cmp=compare) -> List[str]:
    """Return ``versions`` sorted ascending under ``cmp``."""
    return sorted(versions, key=functools.cmp_to_key(cmp))


def latest_version(versions: Optional[Iterable[str]], cmp=compare) -> Optional[str]:
    """Return the greatest version, keeping the first one seen on ties."""
    latest: Optional[str] = None
    for candidate in versions or ():
        if latest is None or cmp(candidate, latest) > 0:
            latest = candidate
    return latest
