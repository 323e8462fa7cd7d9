"""slotsignal — async signal/slot dispatch with reducible results.

A Signal is an extension point a host object exposes. Registered slots run
concurrently on every emission, and their results are reduced into a single
outcome the host acts on (collect them, let any slot veto, or ignore them).
"""

from slotsignal.errors import (
    EmitArgumentCountError,
    EmitCallbackError,
    SignalConfigError,
    SignalError,
    SlotArityError,
    SlotError,
)
from slotsignal.log import configure_logging
from slotsignal.policies import collect, discard, veto
from slotsignal.signal import Signal

__version__ = "0.1.0"

__all__ = [
    "EmitArgumentCountError",
    "EmitCallbackError",
    "Signal",
    "SignalConfigError",
    "SignalError",
    "SlotArityError",
    "SlotError",
    "collect",
    "configure_logging",
    "discard",
    "veto",
]
