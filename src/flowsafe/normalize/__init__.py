"""Defensive helpers for iterating and reading untrusted upstream data."""
from flowsafe.normalize.diagnostics import (
    InputReport,
    PropertyReport,
    describe_input,
    describe_properties,
)
from flowsafe.normalize.inputs import InputSource, StaticSource, safe_input_all
from flowsafe.normalize.lookup import safe_get
from flowsafe.normalize.values import (
    AbsentValue,
    NormalizableValue,
    RecordValue,
    ScalarValue,
    SequenceValue,
    TextValue,
    classify_value,
    ensure_array,
    safe_iterate,
    safe_property_iteration,
)

__all__ = [
    "AbsentValue",
    "InputReport",
    "InputSource",
    "NormalizableValue",
    "PropertyReport",
    "RecordValue",
    "ScalarValue",
    "SequenceValue",
    "StaticSource",
    "TextValue",
    "classify_value",
    "describe_input",
    "describe_properties",
    "ensure_array",
    "safe_get",
    "safe_input_all",
    "safe_iterate",
    "safe_property_iteration",
]
