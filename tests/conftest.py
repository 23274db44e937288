import threading
import time

import pytest


class Recorder:
    """Callable that remembers every call and when it happened."""

    def __init__(self):
        self.calls = []
        self.times = []
        self.threads = []
        self.called = threading.Event()

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        self.times.append(time.monotonic())
        self.threads.append(threading.get_ident())
        self.called.set()

    @property
    def args(self):
        return [args for args, _ in self.calls]


@pytest.fixture
def recorder():
    return Recorder()
