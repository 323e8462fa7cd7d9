"""Declared arity inspection."""

import functools

from slotsignal import arity
from slotsignal.arity import declared_arity


def test_plain_functions():
    def zero():
        pass

    def two(a, done):
        pass

    assert declared_arity(zero) == 0
    assert declared_arity(two) == 2
    assert declared_arity(lambda a, b, done: None) == 3


def test_coroutine_function():
    async def slot(flag, done):
        pass

    assert declared_arity(slot) == 2


def test_defaults_end_the_count():
    def slot(a, done=None, extra=1):
        pass

    assert declared_arity(slot) == 1


def test_varargs_and_keyword_only_not_counted():
    def variadic(*args):
        pass

    def mixed(a, *args, done, **kwargs):
        pass

    assert declared_arity(variadic) == 0
    assert declared_arity(mixed) == 1


def test_bound_method_excludes_self():
    class Host:
        def slot(self, flag, done):
            pass

    assert declared_arity(Host().slot) == 2


def test_partial_reports_remaining_parameters():
    def slot(prefix, flag, done):
        pass

    assert declared_arity(functools.partial(slot, "pre")) == 2


def test_callable_instance():
    class Handler:
        def __call__(self, flag, done):
            pass

    assert declared_arity(Handler()) == 2


def test_uninspectable_callable(monkeypatch):
    def no_signature(obj):
        raise ValueError("no signature found")

    monkeypatch.setattr(arity.inspect, "signature", no_signature)
    assert declared_arity(print) is None
