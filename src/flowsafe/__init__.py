"""Defensive value normalization and task complexity routing for workflow code steps."""
from flowsafe.normalize import ensure_array, safe_get, safe_input_all, safe_iterate
from flowsafe.routing import ComplexityClassifier, TaskDescriptor, Tier, classify_task

__all__ = [
    "ComplexityClassifier",
    "TaskDescriptor",
    "Tier",
    "classify_task",
    "ensure_array",
    "safe_get",
    "safe_input_all",
    "safe_iterate",
]
