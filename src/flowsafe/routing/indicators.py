"""Boolean complexity indicators evaluated against a task descriptor.

Each indicator is a pure predicate. A field that is absent or of an
unexpected type makes its indicator false.
"""

import logging
from collections.abc import Callable

from flowsafe.config.schema import ClassifierConfig
from flowsafe.routing.models import TaskDescriptor

logger = logging.getLogger(__name__)

Indicator = Callable[[TaskDescriptor, ClassifierConfig], bool]


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches(value, accepted: list[str]) -> bool:
    return isinstance(value, str) and value.strip().lower() in accepted


def multi_source(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """More than one source is involved."""
    if isinstance(task.sources, (list, tuple)):
        return len(task.sources) > 1
    return isinstance(task.sources, int) and not isinstance(task.sources, bool) and task.sources > 1


def uncertainty(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Uncertainty markers are present."""
    markers = task.uncertainty_markers
    if markers is True:
        return True
    if isinstance(markers, (list, tuple)):
        return len(markers) > 0
    return isinstance(markers, int) and not isinstance(markers, bool) and markers > 0


def comparison(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Cross-document comparison is required."""
    return task.requires_comparison is True


def quality_critical(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Priority or stakes are marked high/critical."""
    return _matches(task.priority, config.critical_priorities)


def complex_analysis(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Analysis type is marked complex/advanced."""
    return _matches(task.analysis_type, config.complex_analysis_types)


def synthesis(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Output is strategic or synthesis is explicitly required."""
    return task.requires_synthesis is True or _matches(
        task.output_type, config.synthesis_output_types
    )


def long_context(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Context length exceeds the configured threshold."""
    return _is_number(task.context_length) and task.context_length > config.context_length_threshold


def nuance(task: TaskDescriptor, config: ClassifierConfig) -> bool:
    """Nuanced judgement is required."""
    return task.requires_nuance is True


# Evaluation order is part of the output (indicator maps are ordered)
INDICATORS: dict[str, Indicator] = {
    "multi_source": multi_source,
    "uncertainty": uncertainty,
    "comparison": comparison,
    "quality_critical": quality_critical,
    "complex_analysis": complex_analysis,
    "synthesis": synthesis,
    "long_context": long_context,
    "nuance": nuance,
}


def evaluate_indicators(task: TaskDescriptor, config: ClassifierConfig) -> dict[str, bool]:
    """Evaluate every indicator; a predicate that raises counts as false."""
    results: dict[str, bool] = {}
    for name, predicate in INDICATORS.items():
        try:
            results[name] = bool(predicate(task, config))
        except Exception as e:
            logger.debug(f"Indicator {name} failed, treating as false: {e}")
            results[name] = False
    return results
