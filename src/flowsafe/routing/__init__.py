"""Task complexity scoring and tier routing."""
from flowsafe.routing.complexity import ComplexityClassifier, classify_task
from flowsafe.routing.indicators import INDICATORS, evaluate_indicators
from flowsafe.routing.models import Classification, TaskDescriptor, Tier

__all__ = [
    "INDICATORS",
    "Classification",
    "ComplexityClassifier",
    "TaskDescriptor",
    "Tier",
    "classify_task",
    "evaluate_indicators",
]
