"""Safe nested lookups on untrusted records."""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


def _split_path(path: Any) -> list | None:
    if isinstance(path, str):
        return path.split(".")
    if isinstance(path, (list, tuple)):
        return list(path)
    return None


def _step(current: Any, segment: Any) -> Any:
    """Resolve one path segment, returning _MISSING when it cannot be resolved."""
    if isinstance(current, Mapping):
        try:
            return current.get(segment, _MISSING)
        except Exception:
            # Unhashable segment or a mapping with a failing __getitem__
            return _MISSING

    if isinstance(current, (list, tuple)):
        if isinstance(segment, bool):
            return _MISSING
        if isinstance(segment, str) and segment.isdecimal():
            segment = int(segment)
        if isinstance(segment, int) and 0 <= segment < len(current):
            return current[segment]

    return _MISSING


def safe_get(record: Any, path: Any, default: Any = None) -> Any:
    """Walk ``path`` through ``record`` and return the value found.

    ``path`` is either a dotted string (``"a.b.0.c"``) or a list/tuple of
    segments. List and tuple elements are addressed by integer or decimal
    string segments. Returns ``default`` as soon as a segment is missing or
    resolves to ``None``, or when ``path`` has an unsupported type. The value
    found is returned as-is, without normalization.
    """
    segments = _split_path(path)
    if segments is None:
        logger.debug(f"Unsupported path type: {type(path).__name__}")
        return default

    current = record
    for segment in segments:
        current = _step(current, segment)
        if current is _MISSING or current is None:
            return default
    return current
