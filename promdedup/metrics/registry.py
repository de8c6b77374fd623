"""Deduplicating metrics registry.

MetricsRegistry hands out exactly one backend family per canonical metric name
and exactly one instance per canonical (name, label set), no matter how many
call sites ask for it or in which order they spell the labels:

    reg = MetricsRegistry(CollectorRegistry(), counter_factory())
    reg.get("requests_total", {"method": "GET"}).inc()

Names and label names that match a known symbol (see ``labels.py``) are keyed
by the symbol's value, so ``"method"`` and ``"1"`` are the same label.

Both caches are get-or-create under their own lock with the backend call made
inside the critical section, so concurrent first requests for a new key build
it once. Hits are served from an unlocked dict read. The family lock is always
released before the instance lock is taken.

Backend failures (duplicate registration, label shape mismatch) propagate to the
caller unchanged after a warning log; nothing is retried.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from .backend import Family, FamilyFactory
from .canonical import Canonicalizer, LabelPairs
from .keys import FamilyKey, InstanceKey, family_key, instance_key
from .labels import MetricLabelName, MetricName
from .settings import RegistrySettings, build_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()

__all__ = ["MetricsRegistry"]


class MetricsRegistry(Generic[T]):
    """Get-or-create cache of families and instances for one metric kind.

    Parameters
    ----------
    registry : Any
        Backend-wide registry object handed to ``builder.register`` (a
        prometheus_client ``CollectorRegistry`` for the bundled factories).
    factory : FamilyFactory
        Zero-argument callable returning a family builder.
    canonicalizer : Canonicalizer | None
        Name/label canonicalization. Defaults to the bundled MetricName /
        MetricLabelName enums, or identity when ``settings.canonicalize`` is off.
    settings : RegistrySettings | None
        Defaults to ``build_settings()`` (environment).
    """

    def __init__(self, registry: Any, factory: FamilyFactory[T], *,
                 canonicalizer: Canonicalizer | None = None,
                 settings: RegistrySettings | None = None) -> None:
        self._registry = registry
        self._factory = factory
        self._settings = settings if settings is not None else build_settings()
        if canonicalizer is None:
            if self._settings.canonicalize:
                canonicalizer = Canonicalizer(MetricName, MetricLabelName)
            else:
                canonicalizer = Canonicalizer.identity()
        self._canon = canonicalizer
        self._families: dict[FamilyKey, Family[T]] = {}
        self._instances: dict[InstanceKey, T] = {}
        self._families_lock = threading.Lock()
        self._instances_lock = threading.Lock()

    @property
    def backend_registry(self) -> Any:
        return self._registry

    @property
    def canonicalizer(self) -> Canonicalizer:
        return self._canon

    def get(self, name: Any, labels: Mapping[Any, Any] | None = None, *args: Any, **kwargs: Any) -> T:
        """Return the instance for (name, labels), creating family/instance on first use.

        Extra positional/keyword arguments are forwarded to ``family.add`` when
        the instance is first built and ignored on later hits.
        """
        cname = self._canon.name(name)
        clabels = self._canon.labels(labels)
        family = self._get_family(cname, clabels)
        return self._get_instance(family, instance_key(cname, clabels), args, kwargs)

    def _log_created(self, msg: str, *fmt_args: Any, event: str, **extra: Any) -> None:
        level = logging.INFO if self._settings.log_creates else logging.DEBUG
        logger.log(level, msg, *fmt_args, extra={"event": event, **extra})

    def _get_family(self, cname: str, clabels: LabelPairs) -> Family[T]:
        key = family_key(cname)
        family = self._families.get(key, _MISSING)
        if family is not _MISSING:
            return family
        with self._families_lock:
            family = self._families.get(key, _MISSING)
            if family is not _MISSING:
                return family
            labelnames = [k for k, _ in clabels]
            try:
                family = self._factory().name(cname).labelnames(labelnames).register(self._registry)
            except Exception as e:
                logger.warning(
                    "metrics.registry.family_failed name=%s labels=%s err=%s", cname, labelnames, e,
                    extra={"event": "metrics.registry.family_failed", "metric": cname},
                )
                raise
            self._families[key] = family
            self._log_created(
                "metrics.registry.family_created name=%s key=%s families=%d",
                cname, key.digest(), len(self._families),
                event="metrics.registry.family_created", metric=cname,
            )
            return family

    def _get_instance(self, family: Family[T], key: InstanceKey,
                      args: tuple[Any, ...], kwargs: dict[str, Any]) -> T:
        inst = self._instances.get(key, _MISSING)
        if inst is not _MISSING:
            return inst
        with self._instances_lock:
            inst = self._instances.get(key, _MISSING)
            if inst is not _MISSING:
                return inst
            try:
                inst = family.add(key.label_dict(), *args, **kwargs)
            except Exception as e:
                logger.warning(
                    "metrics.registry.instance_failed name=%s labels=%s err=%s", key.name, key.label_dict(), e,
                    extra={"event": "metrics.registry.instance_failed", "metric": key.name},
                )
                raise
            self._instances[key] = inst
            self._log_created(
                "metrics.registry.instance_created name=%s key=%s instances=%d",
                key.name, key.digest(), len(self._instances),
                event="metrics.registry.instance_created", metric=key.name,
            )
            return inst

    def family(self, name: Any) -> Family[T] | None:
        """Cached family for `name`, or None. Never creates one."""
        return self._families.get(family_key(self._canon.name(name)))

    def family_count(self) -> int:
        return len(self._families)

    def instance_count(self) -> int:
        return len(self._instances)

    def families(self) -> list[tuple[FamilyKey, Family[T]]]:
        with self._families_lock:
            return list(self._families.items())

    def instances(self) -> list[tuple[InstanceKey, T]]:
        with self._instances_lock:
            return list(self._instances.items())

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return f"MetricsRegistry(families={self.family_count()}, instances={self.instance_count()})"
