"""Diagnostics describing the shape of incoming data.

Used when a step fails with "is not iterable" style errors: report what
actually arrived before deciding how to iterate it.
"""

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from flowsafe.normalize.inputs import InputSource, safe_input_all
from flowsafe.normalize.values import classify_value, ensure_array

logger = logging.getLogger(__name__)


@dataclass
class PropertyReport:
    """Shape of a single property value."""

    key: str
    kind: str  # "sequence" | "absent" | "text" | "record" | "scalar"
    is_sequence: bool
    element_count: int  # len(ensure_array(value))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class InputReport:
    """Shape of everything fetched from an input source."""

    item_count: int
    first_item: Any = None
    item_kinds: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize for logging/CLI output."""
        return {
            "item_count": self.item_count,
            "first_item": self.first_item,
            "item_kinds": self.item_kinds,
        }


def describe_input(source: InputSource) -> InputReport:
    """Describe the items currently available from ``source``."""
    items = safe_input_all(source)
    report = InputReport(
        item_count=len(items),
        first_item=items[0] if items else None,
        item_kinds=[classify_value(item).kind for item in items],
    )
    logger.debug(f"Input items: {report.item_count}, kinds: {report.item_kinds}")
    return report


def describe_properties(properties: Any) -> list[PropertyReport]:
    """Describe each property of a mapping; non-mappings give ``[]``."""
    if not isinstance(properties, Mapping):
        logger.debug(f"Properties are not a mapping: {type(properties).__name__}")
        return []

    reports = []
    for key, value in properties.items():
        kind = classify_value(value).kind
        report = PropertyReport(
            key=str(key),
            kind=kind,
            is_sequence=kind == "sequence",
            element_count=len(ensure_array(value)),
        )
        logger.debug(f"Property {report.key!r}: {report.kind}, sequence={report.is_sequence}")
        reports.append(report)
    return reports
