import os

import pytest

from infpipe.executor import Runtime


class MemoryStore:
    """Stdout history kept in a list, newest last."""

    def __init__(self, saved=None):
        self.saved = list(saved or [])

    def ensure(self):
        pass

    def last_saved_stdout(self):
        return self.saved[-1] if self.saved else b""

    def append(self, data):
        self.saved.append(data)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def terminal(tmp_path):
    with open(tmp_path / "terminal", "w+b") as f:
        yield f


@pytest.fixture
def devnull():
    with open(os.devnull, "rb") as f:
        yield f


@pytest.fixture
def runtime(store, terminal, devnull):
    return Runtime(store, terminal=terminal, stdin=devnull)


def terminal_output(terminal):
    terminal.flush()
    terminal.seek(0)
    return terminal.read()
