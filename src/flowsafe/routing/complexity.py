"""Complexity scoring and two-tier routing for tasks."""

import logging
from typing import Any

from flowsafe.config.schema import ClassifierConfig
from flowsafe.normalize.values import ensure_array
from flowsafe.routing.indicators import evaluate_indicators
from flowsafe.routing.models import Classification, TaskDescriptor, Tier

logger = logging.getLogger(__name__)


class ComplexityClassifier:
    """Scores tasks against fixed indicators and routes them to a tier.

    The complexity score is the number of true indicators. Scores at or
    above ``config.threshold`` go to the premium tier, everything else to
    the standard tier. Classification is deterministic and never raises.
    """

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = config or ClassifierConfig()

    @property
    def threshold(self) -> int:
        return self.config.threshold

    def _tier_for_score(self, score: int) -> Tier:
        return Tier.PREMIUM if score >= self.config.threshold else Tier.STANDARD

    def classify(self, descriptor: Any) -> Classification:
        """Classify a TaskDescriptor, a mapping, or anything else (as empty)."""
        if not isinstance(descriptor, TaskDescriptor):
            descriptor = TaskDescriptor.from_mapping(descriptor)

        indicators = evaluate_indicators(descriptor, self.config)
        score = sum(1 for value in indicators.values() if value)
        tier = self._tier_for_score(score)

        logger.debug(
            f"Task classified as {tier.value} (score={score}, threshold={self.config.threshold}, "
            f"true={[name for name, value in indicators.items() if value]})"
        )

        return Classification(
            tier=tier,
            score=score,
            indicators=indicators,
            threshold=self.config.threshold,
        )

    def classify_many(self, descriptors: Any) -> list[Classification]:
        """Classify every element of ``ensure_array(descriptors)``."""
        return [self.classify(descriptor) for descriptor in ensure_array(descriptors)]

    def model_for(self, classification: Classification) -> str | None:
        """Model configured for the classification's tier."""
        return getattr(self.config.tier_models, classification.tier.value, None)


def classify_task(descriptor: Any, config: ClassifierConfig | None = None) -> Classification:
    """Classify a single task with the given (or default) configuration."""
    return ComplexityClassifier(config).classify(descriptor)
