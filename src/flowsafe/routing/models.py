"""Data models for task complexity routing."""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from flowsafe.config.defaults import DEFAULT_PREMIUM_THRESHOLD

logger = logging.getLogger(__name__)


class Tier(Enum):
    """Processing tier a task is routed to."""

    PREMIUM = "premium"  # High capability, high cost
    STANDARD = "standard"  # High volume, low cost


# Accepted payload keys for each descriptor field, in lookup order
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "sources": ("sources", "source_count", "sourceCount"),
    "uncertainty_markers": (
        "uncertainty_markers",
        "uncertaintyMarkers",
        "has_uncertainty",
        "hasUncertainty",
    ),
    "requires_comparison": ("requires_comparison", "requiresComparison"),
    "priority": ("priority", "stakes"),
    "analysis_type": ("analysis_type", "analysisType"),
    "output_type": ("output_type", "outputType"),
    "requires_synthesis": ("requires_synthesis", "requiresSynthesis"),
    "context_length": ("context_length", "contextLength"),
    "requires_nuance": ("requires_nuance", "requiresNuance"),
}


@dataclass
class TaskDescriptor:
    """One unit of work to route. Every field is optional and untyped."""
    sources: Any = None  # count or list of sources
    uncertainty_markers: Any = None  # bool, count or list of markers
    requires_comparison: Any = None
    priority: Any = None  # "low" | "medium" | "high" | "critical"
    analysis_type: Any = None  # "basic" | "complex" | "advanced"
    output_type: Any = None  # "summary" | "strategic" | ...
    requires_synthesis: Any = None
    context_length: Any = None  # characters
    requires_nuance: Any = None

    @classmethod
    def from_mapping(cls, data: Any) -> "TaskDescriptor":
        """Build a descriptor from an untyped payload; never raises."""
        if not isinstance(data, Mapping):
            logger.debug(f"Descriptor payload is not a mapping: {type(data).__name__}")
            return cls()

        values: dict[str, Any] = {}
        for name, aliases in FIELD_ALIASES.items():
            for alias in aliases:
                try:
                    value = data.get(alias)
                except Exception:
                    value = None
                if value is not None:
                    values[name] = value
                    break
        return cls(**values)

    def to_dict(self) -> dict:
        """Serialize the populated fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class Classification:
    """Result of classifying a task descriptor."""
    tier: Tier
    score: int  # number of true indicators
    indicators: dict[str, bool] = field(default_factory=dict)
    threshold: int = DEFAULT_PREMIUM_THRESHOLD

    def to_dict(self) -> dict:
        """Serialize for logging/CLI output."""
        return {
            "tier": self.tier.value,
            "score": self.score,
            "indicators": dict(self.indicators),
            "threshold": self.threshold,
        }
