"""Test fixtures — slot factories and a completion-callback recorder.

Learn: slots are checked for exact arity, so the factories here build
one-argument slots (flag, done), matching the param_count=1 signals most
tests use. Delayed slots let tests control completion order.
"""

import asyncio

import pytest
import structlog


class Recorder:
    """Completion callback that remembers every (error, outcome) call."""

    def __init__(self):
        self.calls = []

    def __call__(self, error, outcome):
        self.calls.append((error, outcome))

    @property
    def error(self):
        assert len(self.calls) == 1, f"expected exactly one call, got {self.calls}"
        return self.calls[0][0]

    @property
    def outcome(self):
        assert len(self.calls) == 1, f"expected exactly one call, got {self.calls}"
        return self.calls[0][1]


def returning(value):
    """Slot that reports value right away."""

    def slot(flag, done):
        done(None, value)

    return slot


def failing(error):
    """Slot that reports error right away."""

    def slot(flag, done):
        done(error)

    return slot


def delayed(value, delay, error=None):
    """Coroutine slot that reports after sleeping for delay seconds."""

    async def slot(flag, done):
        await asyncio.sleep(delay)
        done(error, None if error is not None else value)

    return slot


@pytest.fixture()
def recorder():
    return Recorder()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() a test performed."""
    yield
    structlog.reset_defaults()
