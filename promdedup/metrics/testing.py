"""Testing helpers for metrics isolation.

Every helper binds to a brand new prometheus_client CollectorRegistry so tests
never touch (or collide on) the process-wide default REGISTRY.

    with isolated_metrics_registry() as reg:
        reg.get("requests_total", {"method": "GET"}).inc()
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from prometheus_client.registry import CollectorRegistry

from .factory import counter_factory
from .hub import MetricsHub
from .registry import MetricsRegistry
from .settings import RegistrySettings


@contextmanager
def isolated_metrics_registry(factory: Callable[[], Any] | None = None, *,
                              settings: RegistrySettings | None = None) -> Iterator[MetricsRegistry[Any]]:
    """Yield a MetricsRegistry over a fresh CollectorRegistry (counters by default)."""
    settings = settings if settings is not None else RegistrySettings()
    if factory is None:
        factory = counter_factory(numeric_prefix=settings.numeric_prefix)
    yield MetricsRegistry(CollectorRegistry(), factory, settings=settings)


@contextmanager
def isolated_metrics_hub(**hub_kwargs: Any) -> Iterator[MetricsHub]:
    hub_kwargs.setdefault("settings", RegistrySettings())
    yield MetricsHub(CollectorRegistry(), **hub_kwargs)


def sample_value(collector_registry: CollectorRegistry, name: str,
                 labels: dict[str, str] | None = None) -> float | None:
    """Current sample value by exposed sample name (e.g. ``requests_total``)."""
    return collector_registry.get_sample_value(name, labels or {})


__all__ = ["isolated_metrics_registry", "isolated_metrics_hub", "sample_value"]
