"""Built-in result policies as preconfigured Signal constructors.

Learn: the three policies differ only in the processor handed to Signal:

- collect: the outcome is the ordered list of slot results
- veto: the outcome is True unless some slot returned a falsy result
- discard: the outcome is always None (slots are notified, not consulted)

Each policy's "no slots" default falls out of running its processor
over an empty list: [] for collect, True for veto, None for discard.
"""

from slotsignal.signal import Signal


def collect_results(results: list) -> list:
    return results


def all_true(results: list) -> bool:
    """AND the results left to right; True when there are none."""
    outcome = True
    for result in results:
        outcome = outcome and bool(result)
    return outcome


def discard_results(results: list) -> None:
    return None


def collect(param_count: int) -> Signal:
    """Signal whose outcome is every slot's result, in registration order."""
    return Signal(param_count, collect_results)


def veto(param_count: int) -> Signal:
    """Signal whose outcome is False if any slot vetoes with a falsy result."""
    return Signal(param_count, all_true)


def discard(param_count: int) -> Signal:
    """Signal whose outcome is always None."""
    return Signal(param_count, discard_results)
