"""Exceptions raised by flowsafe."""


class FlowsafeError(Exception):
    """Base exception for flowsafe errors."""

    pass


class ConfigError(FlowsafeError):
    """A configuration file could not be read or parsed."""

    pass
