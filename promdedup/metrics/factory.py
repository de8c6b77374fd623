"""
Prometheus family factories for MetricsRegistry.

Each ``*_factory`` helper returns a zero-argument callable producing a
PrometheusFamilyBuilder for one collector class. The builder constructs the
collector unregistered (so name validation and duplicate detection fail
separately), then registers it against the CollectorRegistry it is given.

Names are checked against the classic Prometheus identifier grammar before a
collector is built, whatever the installed prometheus_client release accepts.
Canonical names derived from enum values are bare digits, which that grammar
rejects; those are exposed as ``<numeric_prefix><digits>`` for both metric and
label names. Cache identity stays on the canonical form.
"""
from __future__ import annotations

import functools
import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from prometheus_client import Counter, Gauge, Histogram, Summary
from prometheus_client.registry import CollectorRegistry

from ..utils.exceptions import (
    InvalidMetricNameError,
    LabelShapeError,
    MetricsRegistryError,
    RegistrationConflictError,
)
from .settings import DEFAULT_NUMERIC_PREFIX

logger = logging.getLogger(__name__)

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")
_LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def render_identifier(canonical: str, prefix: str = DEFAULT_NUMERIC_PREFIX) -> str:
    """Exposition name for a canonical metric or label name."""
    if canonical.isascii() and canonical.isdigit():
        return f"{prefix}{canonical}"
    return canonical


class PrometheusFamily:
    """One registered prometheus_client collector plus its canonical dimensions."""

    def __init__(self, collector: Any, name: str, labelnames: Sequence[str],
                 render: Callable[[str], str]) -> None:
        self.collector = collector
        self.name = name
        self.labelnames = tuple(labelnames)
        self._render = render

    @property
    def kind(self) -> str:
        return type(self.collector).__name__.lower()

    def add(self, labels: Mapping[str, str], *args: Any, **kwargs: Any) -> Any:
        if args or kwargs:
            raise TypeError(
                f"{self.name}: prometheus_client children take no construction arguments "
                f"(args={args!r} kwargs={sorted(kwargs)!r}); pass collector options to the factory"
            )
        if sorted(labels) != sorted(self.labelnames):
            raise LabelShapeError(
                f"{self.name}: expected label names {sorted(self.labelnames)}, got {sorted(labels)}"
            )
        if not self.labelnames:
            return self.collector
        return self.collector.labels(**{self._render(k): v for k, v in labels.items()})

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return f"PrometheusFamily(name={self.name!r}, kind={self.kind!r}, labelnames={self.labelnames!r})"


class PrometheusFamilyBuilder:
    def __init__(self, metric_cls: Callable[..., Any], documentation: str = "{name}", *,
                 numeric_prefix: str = DEFAULT_NUMERIC_PREFIX, **ctor_kwargs: Any) -> None:
        self._metric_cls = metric_cls
        self._documentation = documentation
        self._prefix = numeric_prefix
        self._ctor_kwargs = ctor_kwargs
        self._name: str | None = None
        self._labelnames: tuple[str, ...] = ()

    def _render(self, canonical: str) -> str:
        return render_identifier(canonical, self._prefix)

    def name(self, name: str) -> PrometheusFamilyBuilder:
        self._name = name
        return self

    def labelnames(self, labelnames: Sequence[str]) -> PrometheusFamilyBuilder:
        self._labelnames = tuple(labelnames)
        return self

    def _validate(self, exposed: str, labels: tuple[str, ...]) -> None:
        parts = [self._ctor_kwargs.get("namespace"), self._ctor_kwargs.get("subsystem"), exposed]
        full = "_".join(p for p in parts if p)
        if not _METRIC_NAME_RE.match(full):
            raise InvalidMetricNameError(f"invalid metric name {full!r}")
        seen: dict[str, str] = {}
        for canonical, rendered in zip(self._labelnames, labels):
            if not _LABEL_NAME_RE.match(rendered) or rendered.startswith("__"):
                raise InvalidMetricNameError(f"{full}: invalid label name {rendered!r}")
            if rendered in seen:
                raise LabelShapeError(
                    f"{full}: label names {seen[rendered]!r} and {canonical!r} both expose as {rendered!r}"
                )
            seen[rendered] = canonical

    def register(self, registry: CollectorRegistry | None) -> PrometheusFamily:
        if self._name is None:
            raise MetricsRegistryError("family builder has no name")
        exposed = self._render(self._name)
        labels = tuple(self._render(l) for l in self._labelnames)
        self._validate(exposed, labels)
        doc = self._documentation.replace("{name}", self._name)
        try:
            collector = self._metric_cls(exposed, doc, labels, registry=None, **self._ctor_kwargs)
        except ValueError as e:
            raise InvalidMetricNameError(f"prometheus_client rejected family {exposed!r}: {e}") from e
        if registry is not None:
            try:
                registry.register(collector)
            except ValueError as e:
                raise RegistrationConflictError(f"family {exposed!r} already registered: {e}") from e
        logger.debug("metrics.factory.registered name=%s exposed=%s labels=%s", self._name, exposed, labels)
        return PrometheusFamily(collector, self._name, self._labelnames, self._render)


def _factory(metric_cls: Callable[..., Any], documentation: str, **ctor_kwargs: Any) -> Callable[[], PrometheusFamilyBuilder]:
    return functools.partial(PrometheusFamilyBuilder, metric_cls, documentation, **ctor_kwargs)


def counter_factory(documentation: str = "{name}", **ctor_kwargs: Any) -> Callable[[], PrometheusFamilyBuilder]:
    return _factory(Counter, documentation, **ctor_kwargs)


def gauge_factory(documentation: str = "{name}", **ctor_kwargs: Any) -> Callable[[], PrometheusFamilyBuilder]:
    return _factory(Gauge, documentation, **ctor_kwargs)


def histogram_factory(documentation: str = "{name}", buckets: Sequence[float] | None = None,
                      **ctor_kwargs: Any) -> Callable[[], PrometheusFamilyBuilder]:
    if buckets is None:
        return _factory(Histogram, documentation, **ctor_kwargs)
    return _factory(Histogram, documentation, buckets=tuple(buckets), **ctor_kwargs)


def summary_factory(documentation: str = "{name}", **ctor_kwargs: Any) -> Callable[[], PrometheusFamilyBuilder]:
    return _factory(Summary, documentation, **ctor_kwargs)


__all__ = [
    "PrometheusFamily",
    "PrometheusFamilyBuilder",
    "render_identifier",
    "counter_factory",
    "gauge_factory",
    "histogram_factory",
    "summary_factory",
]
