"""Pytest configuration for promdedup.

Responsibilities:
1. Ensure project root on sys.path.
2. Keep promdedup environment flags from leaking into tests.
3. Provide fixtures for isolated registries (never the global REGISTRY).
"""
from __future__ import annotations

import os
import sys

import pytest

_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from prometheus_client.registry import CollectorRegistry  # noqa: E402

from promdedup.metrics import MetricsRegistry, RegistrySettings, counter_factory  # noqa: E402

from tests._helpers import FakeBackend  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_promdedup_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("PROMDEDUP_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def settings():
    return RegistrySettings()


@pytest.fixture()
def collector_registry():
    return CollectorRegistry()


@pytest.fixture()
def counters(collector_registry, settings):
    return MetricsRegistry(collector_registry, counter_factory(), settings=settings)


@pytest.fixture()
def fake_backend():
    return FakeBackend()


@pytest.fixture()
def fake_registry(fake_backend, settings):
    return MetricsRegistry(fake_backend.registered, fake_backend, settings=settings)
