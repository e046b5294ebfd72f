"""Ordered default resolution for optional layout fields.

Layout documents come from upstream generators and are frequently partial.
Every field the compiler reads goes through one of these helpers so the
precedence between candidate keys is spelled out in a single place.

A value counts as *present* when it is truthy: ``None``, ``""``, ``0``,
``False`` and empty containers fall through to the next candidate.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


def first_present(*candidates: Any, default: Any = None) -> Any:
    """Return the first present value among ``candidates``, else ``default``."""

    for value in candidates:
        if value:
            return value
    return default


def pick(source: Any, *keys: str, default: Any = None) -> Any:
    """Look ``keys`` up in ``source`` in order and return the first present value.

    ``source`` may be anything; non-mappings simply yield ``default``.
    """

    if not isinstance(source, Mapping):
        return default
    return first_present(*(source.get(key) for key in keys), default=default)


def pick_sequence(source: Any, *keys: str) -> list:
    """Return the first non-empty list stored under ``keys``.

    Strings and mappings are not treated as sequences. Missing or empty
    sources resolve to an empty list.
    """

    if not isinstance(source, Mapping):
        return []
    for key in keys:
        value = source.get(key)
        if _is_sequence(value) and len(value) > 0:
            return list(value)
    return []


def pick_list(source: Any, *keys: str) -> list:
    """Return the first list stored under ``keys``, even when it is empty.

    An empty list still wins over later keys; only missing or non-list values
    fall through. Nothing usable resolves to an empty list.
    """

    if not isinstance(source, Mapping):
        return []
    for key in keys:
        value = source.get(key)
        if _is_sequence(value):
            return list(value)
    return []


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
