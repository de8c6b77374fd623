"""Metrics introspection utilities.

Enumerate the instances cached by a MetricsRegistry (or every registry of a
MetricsHub) without scraping the Prometheus exposition format.

Functions:
  build_introspection_inventory(registry, kind=None) -> list[dict]
  build_hub_inventory(hub) -> list[dict]

Each entry: name (canonical), kind, labels (canonical name -> value), key
(stable digest of the instance key). Sorted by name, then labels.
"""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

__all__ = [
    "build_introspection_inventory",
    "build_hub_inventory",
]


def _family_kind(family: Any) -> str | None:
    kind = getattr(family, "kind", None)
    return kind if isinstance(kind, str) else None


def build_introspection_inventory(registry: Any, kind: str | None = None) -> list[dict[str, Any]]:
    kinds = {fkey.name: _family_kind(fam) for fkey, fam in registry.families()}
    inventory: list[dict[str, Any]] = []
    for ikey, _inst in registry.instances():
        inventory.append(
            {
                "name": ikey.name,
                "kind": kind or kinds.get(ikey.name),
                "labels": ikey.label_dict(),
                "key": ikey.digest(),
            }
        )
    inventory.sort(key=lambda x: (x["name"], sorted(x["labels"].items())))
    return inventory


def build_hub_inventory(hub: Any) -> list[dict[str, Any]]:
    inventory: list[dict[str, Any]] = []
    for kind, reg in hub.registries().items():
        inventory.extend(build_introspection_inventory(reg, kind=kind))
    inventory.sort(key=lambda x: (x["name"], x["kind"], sorted(x["labels"].items())))
    logger.info(
        "metrics.introspection.built entries=%d",
        len(inventory),
        extra={"event": "metrics.introspection.built", "metric_count": len(inventory)},
    )
    return inventory
