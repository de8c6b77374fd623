"""Recording fake backend for registry tests.

FakeBackend is the family factory; its ``registered`` list is the backend-wide
registry object the builders register into. Every constructed family and
instance is recorded so tests can count constructions directly.
"""
from __future__ import annotations

import threading
import time


class FakeInstance:
    def __init__(self, family, labels, args, kwargs):
        self.family = family
        self.labels = labels
        self.args = args
        self.kwargs = kwargs


class FakeFamily:
    def __init__(self, backend, name, labelnames):
        self.backend = backend
        self.name = name
        self.labelnames = tuple(labelnames)
        self.added: list[FakeInstance] = []
        self.kind = "fake"

    def add(self, labels, *args, **kwargs):
        if self.backend.delay:
            time.sleep(self.backend.delay)
        if self.backend.fail_add is not None:
            raise self.backend.fail_add
        inst = FakeInstance(self, dict(labels), args, kwargs)
        with self.backend.lock:
            self.added.append(inst)
        return inst


class FakeBuilder:
    def __init__(self, backend):
        self.backend = backend
        self._name = None
        self._labelnames = ()

    def name(self, name):
        self._name = name
        return self

    def labelnames(self, labelnames):
        self._labelnames = tuple(labelnames)
        return self

    def register(self, registry):
        if self.backend.delay:
            time.sleep(self.backend.delay)
        if self.backend.fail_register is not None:
            raise self.backend.fail_register
        fam = FakeFamily(self.backend, self._name, self._labelnames)
        with self.backend.lock:
            registry.append(fam)
            self.backend.built.append(fam)
        return fam


class FakeBackend:
    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.fail_register: Exception | None = None
        self.fail_add: Exception | None = None
        self.built: list[FakeFamily] = []
        self.registered: list[FakeFamily] = []
        self.factory_calls = 0
        self.lock = threading.Lock()

    def __call__(self):
        with self.lock:
            self.factory_calls += 1
        return FakeBuilder(self)

    def instances_built(self) -> int:
        return sum(len(f.added) for f in self.built)
