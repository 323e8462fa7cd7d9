"""Signal exceptions.

Learn: misuse (bad configuration, bad slot arity, wrong emit arguments) is
raised synchronously to the caller. Failures during a live emission never
raise out of emit(); they travel through the completion callback instead.
Each class also derives from the builtin a generic caller would expect.
"""

from slotsignal.arity import callable_name


class SignalError(Exception):
    """Base class for every error raised by slotsignal."""


class SignalConfigError(SignalError, ValueError):
    pass


class SlotArityError(SignalError, TypeError):
    """A slot's declared parameter count does not match the signal."""

    def __init__(self, slot, declared, expected):
        self.slot = slot
        self.declared = declared
        self.expected = expected
        if declared is None:
            detail = "its parameter count could not be inspected"
        else:
            detail = f"it declares {declared} parameter(s)"
        super().__init__(
            f"Slot {callable_name(slot)} must accept {expected} parameter(s) "
            f"(arguments plus completion callback), but {detail}"
        )


class EmitArgumentCountError(SignalError, TypeError):
    """emit() was called with the wrong number of arguments."""

    def __init__(self, given, expected, message=None):
        self.given = given
        self.expected = expected
        super().__init__(
            message
            or f"Signal must be emitted with {expected} argument(s) "
            f"(arguments plus completion callback), got {given}"
        )


class EmitCallbackError(SignalError, TypeError):
    """The last emit() argument is not a callable completion callback."""

    def __init__(self, callback):
        self.callback = callback
        super().__init__(
            f"Last emit argument must be a completion callback, got {callback!r}"
        )


class SlotError(SignalError):
    """Wraps a slot error that cannot travel through a future as-is.

    That covers non-exception values, StopIteration, and BaseException-only
    errors such as CancelledError. The original is kept in .error.
    """

    def __init__(self, error):
        self.error = error
        super().__init__(f"Slot reported an error: {error!r}")
