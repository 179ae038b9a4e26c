"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flowsafe.config.defaults import (
    DEFAULT_COMPLEX_ANALYSIS_TYPES,
    DEFAULT_CONTEXT_LENGTH_THRESHOLD,
    DEFAULT_CRITICAL_PRIORITIES,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PREMIUM_MODEL,
    DEFAULT_PREMIUM_THRESHOLD,
    DEFAULT_PREVIEW_CHARS,
    DEFAULT_STANDARD_MODEL,
    DEFAULT_SYNTHESIS_OUTPUT_TYPES,
)


class TierModels(BaseModel):
    """Model used for each processing tier."""

    premium: str | None = DEFAULT_PREMIUM_MODEL  # High capability, high cost
    standard: str | None = DEFAULT_STANDARD_MODEL  # High volume, low cost


class ClassifierConfig(BaseModel):
    """Task complexity classifier configuration."""

    threshold: int = Field(default=DEFAULT_PREMIUM_THRESHOLD, ge=0)
    context_length_threshold: int = Field(default=DEFAULT_CONTEXT_LENGTH_THRESHOLD, ge=0)
    critical_priorities: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CRITICAL_PRIORITIES)
    )
    complex_analysis_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COMPLEX_ANALYSIS_TYPES)
    )
    synthesis_output_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SYNTHESIS_OUTPUT_TYPES)
    )
    tier_models: TierModels = Field(default_factory=TierModels)

    @field_validator("critical_priorities", "complex_analysis_types", "synthesis_output_types")
    @classmethod
    def _lowercase(cls, values: list[str]) -> list[str]:
        return [v.strip().lower() for v in values]


class ProcessingConfig(BaseModel):
    """Item processing loop configuration."""

    skip_empty_items: bool = True
    include_error_stack: bool = True
    preview_chars: int = Field(default=DEFAULT_PREVIEW_CHARS, ge=0)


class GlobalConfig(BaseModel):
    """Global flowsafe configuration."""

    color: bool = True
    verbose: bool = False
    log_level: str = DEFAULT_LOG_LEVEL  # DEBUG, INFO, WARNING, ERROR

    @field_validator("log_level")
    @classmethod
    def _valid_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level


class FlowsafeConfig(BaseModel):
    """Root configuration model for flowsafe."""

    model_config = ConfigDict(populate_by_name=True)

    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)

    @classmethod
    def default(cls) -> "FlowsafeConfig":
        """Create default configuration."""
        return cls()


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_dir = Path.home() / ".config" / "flowsafe"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get the main configuration file path."""
    return get_config_dir() / "config.toml"
