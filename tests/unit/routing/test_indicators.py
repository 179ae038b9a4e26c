"""Tests for complexity indicators."""

import pytest

from flowsafe.config.schema import ClassifierConfig
from flowsafe.routing import indicators
from flowsafe.routing.indicators import INDICATORS, evaluate_indicators
from flowsafe.routing.models import TaskDescriptor


@pytest.fixture
def config():
    return ClassifierConfig()


def test_indicator_order():
    """Test the fixed indicator order."""
    assert list(INDICATORS) == [
        "multi_source",
        "uncertainty",
        "comparison",
        "quality_critical",
        "complex_analysis",
        "synthesis",
        "long_context",
        "nuance",
    ]


@pytest.mark.parametrize(
    "sources, expected",
    [
        (None, False),
        (1, False),
        (2, True),
        ([1], False),
        ([1, 2], True),
        (("a", "b", "c"), True),
        ("2", False),
        (True, False),
        (2.5, False),
    ],
)
def test_multi_source(config, sources, expected):
    """Test source counts and lists."""
    assert indicators.multi_source(TaskDescriptor(sources=sources), config) is expected


@pytest.mark.parametrize(
    "markers, expected",
    [(None, False), (True, True), (False, False), ([], False), (["maybe"], True), (2, True), ("yes", False)],
)
def test_uncertainty(config, markers, expected):
    """Test uncertainty marker shapes."""
    assert indicators.uncertainty(TaskDescriptor(uncertainty_markers=markers), config) is expected


def test_boolean_flags_require_true(config):
    """Test flag indicators only accept a real True."""
    assert indicators.comparison(TaskDescriptor(requires_comparison=True), config) is True
    assert indicators.comparison(TaskDescriptor(requires_comparison="true"), config) is False
    assert indicators.nuance(TaskDescriptor(requires_nuance=True), config) is True
    assert indicators.nuance(TaskDescriptor(requires_nuance=1), config) is False


@pytest.mark.parametrize(
    "priority, expected",
    [("high", True), ("Critical ", True), ("medium", False), (None, False), (5, False)],
)
def test_quality_critical(config, priority, expected):
    """Test priority levels."""
    assert indicators.quality_critical(TaskDescriptor(priority=priority), config) is expected


def test_complex_analysis(config):
    """Test analysis types."""
    assert indicators.complex_analysis(TaskDescriptor(analysis_type="advanced"), config) is True
    assert indicators.complex_analysis(TaskDescriptor(analysis_type="basic"), config) is False


def test_synthesis(config):
    """Test explicit synthesis flag and strategic output type."""
    assert indicators.synthesis(TaskDescriptor(requires_synthesis=True), config) is True
    assert indicators.synthesis(TaskDescriptor(output_type="strategic"), config) is True
    assert indicators.synthesis(TaskDescriptor(output_type="summary"), config) is False


def test_long_context(config):
    """Test the context length threshold is exclusive."""
    threshold = config.context_length_threshold

    assert indicators.long_context(TaskDescriptor(context_length=threshold + 1), config) is True
    assert indicators.long_context(TaskDescriptor(context_length=threshold), config) is False
    assert indicators.long_context(TaskDescriptor(context_length="99999"), config) is False
    assert indicators.long_context(TaskDescriptor(context_length=True), config) is False


def test_custom_config_values():
    """Test indicators read their accepted values from config."""
    config = ClassifierConfig(critical_priorities=["URGENT"], context_length_threshold=100)

    assert indicators.quality_critical(TaskDescriptor(priority="urgent"), config) is True
    assert indicators.quality_critical(TaskDescriptor(priority="high"), config) is False
    assert indicators.long_context(TaskDescriptor(context_length=101), config) is True


def test_evaluate_indicators_all_false_for_empty(config):
    """Test an empty descriptor sets every indicator to false."""
    results = evaluate_indicators(TaskDescriptor(), config)

    assert list(results) == list(INDICATORS)
    assert not any(results.values())


def test_evaluate_indicators_failing_predicate_is_false(config, monkeypatch):
    """Test a predicate that raises is treated as false."""

    def broken(task, cfg):
        raise RuntimeError("broken predicate")

    monkeypatch.setitem(INDICATORS, "comparison", broken)

    results = evaluate_indicators(TaskDescriptor(requires_comparison=True), config)

    assert results["comparison"] is False


def test_malformed_field_types_do_not_raise(config):
    """Test exotic field values never raise."""

    class Weird:
        def __gt__(self, other):
            raise TypeError("no ordering")

    descriptor = TaskDescriptor(
        sources=Weird(),
        uncertainty_markers=object(),
        priority=["high"],
        analysis_type={"complex": True},
        output_type=b"strategic",
        context_length=Weird(),
    )

    assert not any(evaluate_indicators(descriptor, config).values())
