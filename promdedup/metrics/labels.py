"""
Well-known metric and label names.

Metric and label names listed here are canonicalized to the decimal string of
their enum value, so every call site spelling a known name ends up on the same
family and label dimension. Names not listed are used verbatim.

Parsing is by member name only (a numeric string is never a member name), which
makes "method" and "1" canonicalize to the same label when method == 1.
"""
from __future__ import annotations

from enum import Enum, IntEnum


class MetricName(IntEnum):
    process_start_time_seconds = 0
    service_restarts_total = 1
    rpc_requests_total = 2
    rpc_errors_total = 3
    rpc_latency_seconds = 4
    queue_depth = 5
    cache_hits_total = 6
    cache_misses_total = 7


class MetricLabelName(IntEnum):
    service = 0
    method = 1
    status = 2
    result = 3
    error_type = 4
    component = 5
    provider = 6


def parse_symbol(enum_cls: type[Enum] | None, value: object) -> int | None:
    """Return the integer value `value` names in `enum_cls`, or None.

    Members of any other enumeration are not symbols of `enum_cls` and give None.
    """
    if enum_cls is None:
        return None
    if isinstance(value, enum_cls):
        return int(value.value)
    if not isinstance(value, str):
        return None
    member = enum_cls.__members__.get(value)
    if member is None:
        return None
    return int(member.value)


__all__ = [
    "MetricName",
    "MetricLabelName",
    "parse_symbol",
]
