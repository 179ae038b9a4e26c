"""Upstream input sources and the safe bulk fetch around them."""

import logging
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class InputSource(Protocol):
    """Anything that can hand over all currently available input items."""

    def all(self) -> Any:
        """Return the current input items."""
        ...


class StaticSource:
    """In-memory input source over a fixed payload."""

    def __init__(self, items: Any = None) -> None:
        self.items = [] if items is None else items

    def all(self) -> Any:
        return self.items

    def __repr__(self) -> str:
        return f"StaticSource({self.items!r})"


def safe_input_all(source: InputSource) -> list:
    """Fetch every item from ``source`` without ever raising.

    Fetch failures give ``[]``. A tuple is converted to a list and any
    single non-sequence value is wrapped in a one-element list.
    """
    try:
        items = source.all()
    except Exception as e:
        logger.warning(f"Failed to fetch input items: {e}")
        return []

    if isinstance(items, list):
        return items
    if isinstance(items, tuple):
        return list(items)
    return [items]
