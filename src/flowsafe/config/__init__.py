"""Configuration management for flowsafe."""
from flowsafe.config.manager import ConfigManager
from flowsafe.config.schema import (
    ClassifierConfig,
    FlowsafeConfig,
    GlobalConfig,
    ProcessingConfig,
    TierModels,
)

__all__ = [
    "ClassifierConfig",
    "ConfigManager",
    "FlowsafeConfig",
    "GlobalConfig",
    "ProcessingConfig",
    "TierModels",
]
