"""Deduplicating metrics facade.

Public surface:
  MetricsRegistry      - get-or-create cache for one metric kind
  MetricsHub           - counter/gauge/histogram/summary registries over one CollectorRegistry
  *_factory            - prometheus_client family factories
  Canonicalizer        - name/label canonicalization
  MetricName / MetricLabelName - bundled symbol enumerations
"""
from __future__ import annotations

from .canonical import Canonicalizer
from .factory import (
    PrometheusFamily,
    PrometheusFamilyBuilder,
    counter_factory,
    gauge_factory,
    histogram_factory,
    render_identifier,
    summary_factory,
)
from .hub import MetricsHub
from .introspection import build_hub_inventory, build_introspection_inventory
from .keys import FamilyKey, InstanceKey
from .labels import MetricLabelName, MetricName, parse_symbol
from .registry import MetricsRegistry
from .settings import RegistrySettings, build_settings
from .testing import isolated_metrics_hub, isolated_metrics_registry

__all__ = [
    "Canonicalizer",
    "FamilyKey",
    "InstanceKey",
    "MetricLabelName",
    "MetricName",
    "MetricsHub",
    "MetricsRegistry",
    "PrometheusFamily",
    "PrometheusFamilyBuilder",
    "RegistrySettings",
    "build_hub_inventory",
    "build_introspection_inventory",
    "build_settings",
    "counter_factory",
    "gauge_factory",
    "histogram_factory",
    "isolated_metrics_hub",
    "isolated_metrics_registry",
    "parse_symbol",
    "render_identifier",
    "summary_factory",
]
