"""promdedup: deduplicating metric registry on top of prometheus_client."""

from .version import __version__, get_version

__all__ = ["__version__", "get_version"]
