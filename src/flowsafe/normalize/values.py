"""Coercion of untrusted values into lists that are safe to iterate."""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from flowsafe.normalize.lookup import safe_get

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceValue:
    """An ordered sequence (list or tuple)."""

    items: list | tuple
    kind = "sequence"


@dataclass(frozen=True)
class AbsentValue:
    """No value at all."""

    kind = "absent"


@dataclass(frozen=True)
class TextValue:
    """A string, possibly JSON-encoded."""

    text: str
    kind = "text"


@dataclass(frozen=True)
class RecordValue:
    """A mapping of fields."""

    fields: Mapping
    kind = "record"


@dataclass(frozen=True)
class ScalarValue:
    """Anything else: numbers, booleans, bytes, arbitrary objects."""

    value: Any
    kind = "scalar"


NormalizableValue = SequenceValue | AbsentValue | TextValue | RecordValue | ScalarValue


def classify_value(value: Any) -> NormalizableValue:
    """Convert a raw upstream value into its NormalizableValue variant."""
    if isinstance(value, (list, tuple)):
        return SequenceValue(value)
    if value is None:
        return AbsentValue()
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, Mapping):
        return RecordValue(value)
    return ScalarValue(value)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def _parse_text(text: str) -> list:
    try:
        # NaN and Infinity are not JSON
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # Not structured data, keep the text as an opaque scalar
        logger.debug("Value is not JSON, wrapping raw text (%d chars)", len(text))
        return [text]
    return parsed if isinstance(parsed, list) else [parsed]


def ensure_array(value: Any) -> list | tuple:
    """Coerce any value into an ordered sequence.

    - list/tuple: returned unchanged
    - None: ``[]``
    - str: parsed as JSON; a parsed list is returned, any other parsed
      value is wrapped; unparseable text is wrapped as-is
    - anything else: wrapped in a one-element list

    Never raises.
    """
    match classify_value(value):
        case SequenceValue(items=items):
            return items
        case AbsentValue():
            return []
        case TextValue(text=text):
            return _parse_text(text)
        case RecordValue(fields=fields):
            return [fields]
        case ScalarValue(value=scalar):
            return [scalar]


def safe_iterate(items: Any, callback: Callable[[Any], Any]) -> list:
    """Map ``callback`` over ``ensure_array(items)``.

    Errors raised by the callback itself are not caught.
    """
    return [callback(item) for item in ensure_array(items)]


def safe_property_iteration(properties: Any, item_name: str) -> list | tuple:
    """Return the named property of ``properties`` as a sequence.

    Missing, empty or falsy properties give ``[]``.
    """
    value = safe_get(properties, [item_name]) if properties else None
    if not value:
        logger.warning(f"Property '{item_name}' is missing or empty")
        return []
    return ensure_array(value)
