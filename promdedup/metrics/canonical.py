"""Canonical forms for metric names and label names.

A name that parses as a known symbol becomes the decimal string of the symbol's
value; anything else passes through as text. Enum members from some other
enumeration pass through as their member name, so the result does not depend on
how the running Python version formats IntEnum members. Label values are never
rewritten beyond ``str()`` coercion (the same coercion prometheus_client applies
when binding label values).
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from ..utils.exceptions import LabelShapeError
from .labels import MetricLabelName, MetricName, parse_symbol

LabelPairs = tuple[tuple[str, str], ...]


def _text(raw: object) -> str:
    if isinstance(raw, Enum):
        return raw.name
    return str(raw)


class Canonicalizer:
    """Pure name/label canonicalization over two symbol enumerations.

    Either enumeration may be None, which turns that half into identity.
    """

    def __init__(self, names: type[Enum] | None = MetricName,
                 labels: type[Enum] | None = MetricLabelName) -> None:
        self._names = names
        self._labels = labels

    @classmethod
    def identity(cls) -> Canonicalizer:
        return cls(None, None)

    def name(self, raw: object) -> str:
        value = parse_symbol(self._names, raw)
        return _text(raw) if value is None else str(value)

    def label(self, raw: object) -> str:
        value = parse_symbol(self._labels, raw)
        return _text(raw) if value is None else str(value)

    def labels(self, labels: Mapping[object, object] | None) -> LabelPairs:
        """Canonical (name, value) pairs sorted by canonical label name.

        Raises LabelShapeError when two raw label names share a canonical form,
        since the set would then carry two values for one dimension.
        """
        if not labels:
            return ()
        out: dict[str, str] = {}
        raw_by_canonical: dict[str, object] = {}
        for raw_name, raw_value in labels.items():
            cname = self.label(raw_name)
            if cname in out:
                raise LabelShapeError(
                    f"label names {raw_by_canonical[cname]!r} and {raw_name!r} "
                    f"both canonicalize to {cname!r}"
                )
            out[cname] = str(raw_value)
            raw_by_canonical[cname] = raw_name
        return tuple(sorted(out.items()))

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        names = getattr(self._names, '__name__', None)
        labels = getattr(self._labels, '__name__', None)
        return f"Canonicalizer(names={names}, labels={labels})"


__all__ = ["Canonicalizer", "LabelPairs"]
