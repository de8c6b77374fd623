"""One MetricsRegistry per metric kind over a shared CollectorRegistry.

The hub is the object an application builds once and passes to its
instrumentation call sites. It owns no global state: two hubs over two
CollectorRegistry objects are fully independent.

A name is owned by the first kind that claims it; asking another kind for the
same name surfaces the backend's RegistrationConflictError.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from prometheus_client.registry import CollectorRegistry

from .canonical import Canonicalizer
from .factory import counter_factory, gauge_factory, histogram_factory, summary_factory
from .labels import MetricLabelName, MetricName
from .registry import MetricsRegistry
from .settings import RegistrySettings, build_settings

logger = logging.getLogger(__name__)

__all__ = ["MetricsHub", "KINDS"]

KINDS = ("counter", "gauge", "histogram", "summary")


class MetricsHub:
    def __init__(self, collector_registry: CollectorRegistry | None = None, *,
                 settings: RegistrySettings | None = None,
                 names: type[Enum] | None = MetricName,
                 labels: type[Enum] | None = MetricLabelName,
                 histogram_buckets: Sequence[float] | None = None,
                 documentation: str = "{name}") -> None:
        self.collector_registry = collector_registry if collector_registry is not None else CollectorRegistry()
        self.settings = settings if settings is not None else build_settings()
        if self.settings.canonicalize:
            canon = Canonicalizer(names, labels)
        else:
            canon = Canonicalizer.identity()
        prefix = self.settings.numeric_prefix

        def _reg(factory: Any) -> MetricsRegistry[Any]:
            return MetricsRegistry(self.collector_registry, factory, canonicalizer=canon, settings=self.settings)

        self.counters = _reg(counter_factory(documentation, numeric_prefix=prefix))
        self.gauges = _reg(gauge_factory(documentation, numeric_prefix=prefix))
        self.histograms = _reg(histogram_factory(documentation, buckets=histogram_buckets, numeric_prefix=prefix))
        self.summaries = _reg(summary_factory(documentation, numeric_prefix=prefix))
        logger.debug("metrics.hub.initialized canonicalize=%s prefix=%s", self.settings.canonicalize, prefix)

    def registries(self) -> dict[str, MetricsRegistry[Any]]:
        return {
            "counter": self.counters,
            "gauge": self.gauges,
            "histogram": self.histograms,
            "summary": self.summaries,
        }

    def counter(self, name: Any, labels: Mapping[Any, Any] | None = None) -> Any:
        return self.counters.get(name, labels)

    def gauge(self, name: Any, labels: Mapping[Any, Any] | None = None) -> Any:
        return self.gauges.get(name, labels)

    def histogram(self, name: Any, labels: Mapping[Any, Any] | None = None) -> Any:
        return self.histograms.get(name, labels)

    def summary(self, name: Any, labels: Mapping[Any, Any] | None = None) -> Any:
        return self.summaries.get(name, labels)

    def family_count(self) -> int:
        return sum(r.family_count() for r in self.registries().values())

    def instance_count(self) -> int:
        return sum(r.instance_count() for r in self.registries().values())
