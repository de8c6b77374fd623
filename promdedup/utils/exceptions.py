"""promdedup exception hierarchy.

A small exception tree for the failures the registry can surface. Every
failure here is a usage or configuration defect; there is no transient
category and nothing is retried.

The metrics errors also derive from ValueError so callers written against
prometheus_client (which signals duplicate names and bad labels with
ValueError) keep working unchanged.
"""
from __future__ import annotations


class PromDedupError(Exception):
    """Base class for all promdedup exceptions."""


class ConfigError(PromDedupError):
    """Invalid settings or environment values."""


class MetricsRegistryError(PromDedupError):
    """Base class for failures creating families or instances."""


class RegistrationConflictError(MetricsRegistryError, ValueError):
    """Backend already holds a collector under this name."""


class LabelShapeError(MetricsRegistryError, ValueError):
    """Label set does not match the family's dimensions or is ambiguous."""


class InvalidMetricNameError(MetricsRegistryError, ValueError):
    """Backend rejected the metric or label name."""


__all__ = [
    "PromDedupError",
    "ConfigError",
    "MetricsRegistryError",
    "RegistrationConflictError",
    "LabelShapeError",
    "InvalidMetricNameError",
]
