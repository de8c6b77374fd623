"""Backend capability contract consumed by MetricsRegistry.

A family factory is any zero-argument callable returning a FamilyBuilder. The
registry names the builder, hands it the canonical label names, and registers
it against the backend-wide registry object; the resulting Family then
materializes one instance per label set.

promdedup.metrics.factory implements this contract for prometheus_client.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Family(Protocol[T_co]):
    def add(self, labels: Mapping[str, str], *args: Any, **kwargs: Any) -> T_co: ...


class FamilyBuilder(Protocol[T_co]):
    def name(self, name: str) -> FamilyBuilder[T_co]: ...

    def labelnames(self, labelnames: Sequence[str]) -> FamilyBuilder[T_co]: ...

    def register(self, registry: Any) -> Family[T_co]: ...


FamilyFactory = Callable[[], FamilyBuilder[T]]

__all__ = ["Family", "FamilyBuilder", "FamilyFactory"]
