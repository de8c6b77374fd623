"""Cache keys for the family and instance caches.

Keys are built from canonical forms and used directly as dict keys, so a
lookup compares the whole key and two different keys can never alias each
other through a hash collision. ``digest()`` is only a stable label for logs
and introspection output.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass

from .canonical import LabelPairs


def _digest(payload: object) -> str:
    # JSON keeps the encoding unambiguous ("ab"+"c" never equals "a"+"bc")
    raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return hashlib.blake2b(raw.encode("utf-8"), digest_size=8).hexdigest()


@dataclass(frozen=True)
class FamilyKey:
    name: str

    def digest(self) -> str:
        return _digest([self.name])


@dataclass(frozen=True)
class InstanceKey:
    name: str
    labels: LabelPairs = ()

    @property
    def family(self) -> FamilyKey:
        return FamilyKey(self.name)

    def label_dict(self) -> dict[str, str]:
        return dict(self.labels)

    def digest(self) -> str:
        return _digest([self.name, [list(p) for p in self.labels]])


def family_key(canonical_name: str) -> FamilyKey:
    return FamilyKey(canonical_name)


def instance_key(canonical_name: str, canonical_labels: LabelPairs) -> InstanceKey:
    # Canonicalizer already sorts; sort again so hand-built pairs key identically
    return InstanceKey(canonical_name, tuple(sorted(canonical_labels)))


__all__ = ["FamilyKey", "InstanceKey", "family_key", "instance_key"]
