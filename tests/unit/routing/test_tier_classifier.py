"""Tests for ComplexityClassifier."""

import pytest

from flowsafe.config.schema import ClassifierConfig, TierModels
from flowsafe.routing.complexity import ComplexityClassifier, classify_task
from flowsafe.routing.models import TaskDescriptor, Tier


@pytest.fixture
def classifier():
    return ComplexityClassifier()


def test_empty_descriptor_is_standard(classifier):
    """Test an empty descriptor scores zero."""
    result = classifier.classify({})

    assert result.score == 0
    assert result.tier == Tier.STANDARD
    assert len(result.indicators) == 8


def test_threshold_boundary_score_two(classifier):
    """Test score 2 stays on the standard tier."""
    result = classifier.classify({"sources": [1, 2], "requiresNuance": True})

    assert result.score == 2
    assert result.tier == Tier.STANDARD


def test_threshold_boundary_score_three(classifier):
    """Test score 3 reaches the premium tier."""
    result = classifier.classify(
        {"sources": [1, 2], "requiresNuance": True, "requiresComparison": True}
    )

    assert result.score == 3
    assert result.tier == Tier.PREMIUM


def test_end_to_end_scenario(classifier):
    """Test multi-source, critical stakes and synthesis route to premium."""
    result = classifier.classify(
        {"sources": [1, 2], "stakes": "critical", "requiresSynthesis": True}
    )

    assert result.indicators["multi_source"] is True
    assert result.indicators["quality_critical"] is True
    assert result.indicators["synthesis"] is True
    assert result.score == 3
    assert result.tier == Tier.PREMIUM


def test_all_indicators_true(classifier):
    """Test the score upper bound."""
    result = classifier.classify(
        TaskDescriptor(
            sources=4,
            uncertainty_markers=["unclear figures"],
            requires_comparison=True,
            priority="high",
            analysis_type="complex",
            output_type="strategic",
            context_length=50000,
            requires_nuance=True,
        )
    )

    assert result.score == 8
    assert all(result.indicators.values())


def test_determinism(classifier):
    """Test identical descriptors give identical classifications."""
    descriptor = {"sources": 3, "priority": "high", "contextLength": 9000}

    first = classifier.classify(descriptor)
    second = classifier.classify(dict(descriptor))

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_malformed_fields_do_not_raise(classifier):
    """Test wrong field types default their indicators to false."""
    result = classifier.classify(
        {"sources": "two", "priority": 7, "contextLength": "long", "requiresNuance": "yes"}
    )

    assert result.score == 0
    assert result.tier == Tier.STANDARD


@pytest.mark.parametrize("descriptor", [None, "text", 42, [1, 2], object()])
def test_non_mapping_descriptor(classifier, descriptor):
    """Test non-mapping input is treated as an empty descriptor."""
    result = classifier.classify(descriptor)

    assert result.score == 0
    assert result.tier == Tier.STANDARD


def test_threshold_is_configurable():
    """Test a custom threshold changes the tier boundary."""
    descriptor = {"sources": 2, "requiresNuance": True}

    assert ComplexityClassifier(ClassifierConfig(threshold=2)).classify(descriptor).tier == Tier.PREMIUM
    assert ComplexityClassifier(ClassifierConfig(threshold=5)).classify(
        {"sources": 2, "requiresNuance": True, "requiresComparison": True, "priority": "high"}
    ).tier == Tier.STANDARD


def test_threshold_zero_routes_everything_premium():
    """Test threshold 0 makes every task premium."""
    classifier = ComplexityClassifier(ClassifierConfig(threshold=0))
    result = classifier.classify({})

    assert result.tier == Tier.PREMIUM
    assert result.threshold == 0


def test_classify_many(classifier):
    """Test batch classification over normalized input."""
    results = classifier.classify_many(
        '[{"sources": 2, "priority": "high", "requiresNuance": true}, {}]'
    )

    assert [r.tier for r in results] == [Tier.PREMIUM, Tier.STANDARD]
    assert classifier.classify_many(None) == []
    assert len(classifier.classify_many({"sources": 2})) == 1


def test_model_for_tier():
    """Test tier model lookup."""
    config = ClassifierConfig(tier_models=TierModels(premium="big-model", standard="small-model"))
    classifier = ComplexityClassifier(config)

    premium = classifier.classify({"sources": 2, "priority": "high", "requiresNuance": True})
    standard = classifier.classify({})

    assert classifier.model_for(premium) == "big-model"
    assert classifier.model_for(standard) == "small-model"


def test_classify_task_helper():
    """Test the module-level helper."""
    result = classify_task({"sources": [1, 2], "stakes": "critical", "requiresSynthesis": True})
    assert result.tier == Tier.PREMIUM
