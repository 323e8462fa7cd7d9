"""Declared arity of a callable.

Learn: a slot's arity is the number of leading positional parameters that
have no default value. *args and keyword-only parameters are not counted,
and a parameter with a default ends the count. Bound methods and
functools.partial objects report what is left to be supplied, which is
what inspect.signature already gives us.
"""

import inspect
from typing import Callable, Optional

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def declared_arity(func: Callable) -> Optional[int]:
    """Return the declared positional parameter count, or None if unknown."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins and C callables carry no signature metadata
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind not in _POSITIONAL or param.default is not param.empty:
            break
        count += 1
    return count


def callable_name(func) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
