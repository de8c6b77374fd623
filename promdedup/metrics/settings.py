"""Registry settings derived from environment variables.

A frozen snapshot of the few knobs the registry and the Prometheus adapter
read. Build once with ``build_settings()`` and pass it where needed; modules
never read the environment on the hot path.

Environment Variables
---------------------
PROMDEDUP_CANONICALIZE    : Map known metric/label names to enum values (default on).
PROMDEDUP_NUMERIC_PREFIX  : Prefix rendering numeric canonical names as Prometheus
                            identifiers (default ``id_``).
PROMDEDUP_LOG_CREATES     : Log family/instance creation at INFO instead of DEBUG.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from ..utils.env_flags import get_bool, get_str
from ..utils.exceptions import ConfigError

__all__ = [
    "RegistrySettings",
    "build_settings",
    "DEFAULT_NUMERIC_PREFIX",
]

DEFAULT_NUMERIC_PREFIX = "id_"

# Must be usable in front of digits for both metric names and label names
_PREFIX_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


@dataclass(frozen=True)
class RegistrySettings:
    canonicalize: bool = True
    numeric_prefix: str = DEFAULT_NUMERIC_PREFIX
    log_creates: bool = False

    def __post_init__(self) -> None:
        if not _PREFIX_RE.match(self.numeric_prefix) or self.numeric_prefix.startswith("__"):
            raise ConfigError(f"invalid numeric prefix {self.numeric_prefix!r}")


def build_settings() -> RegistrySettings:
    return RegistrySettings(
        canonicalize=get_bool("PROMDEDUP_CANONICALIZE", True),
        numeric_prefix=get_str("PROMDEDUP_NUMERIC_PREFIX", DEFAULT_NUMERIC_PREFIX),
        log_creates=get_bool("PROMDEDUP_LOG_CREATES", False),
    )
