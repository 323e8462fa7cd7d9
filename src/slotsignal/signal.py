"""Signal: async slots run in parallel, results reduced to one outcome.

Learn: a Signal is a hook point a host object exposes. Unlike a plain
event emitter, the handlers ("slots") report results, and a processor
reduces those results into one outcome the host acts on.

Emission protocol:
1. Validate the argument count synchronously (misuse raises right away)
2. Snapshot the registered slots
3. Start every slot with the same arguments plus its own done(error, result)
4. Results land by registration index, whatever order slots finish in
5. First error wins → callback(error, None); otherwise the processor runs
   synchronously over the ordered results → callback(None, outcome)

Each emission gets one future per slot and joins them with asyncio.gather,
which surfaces the first failure without cancelling the other slots.
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional

import structlog

from slotsignal.arity import callable_name, declared_arity
from slotsignal.config import settings
from slotsignal.errors import (
    EmitArgumentCountError,
    EmitCallbackError,
    SignalConfigError,
    SlotArityError,
    SlotError,
)

logger = structlog.get_logger()

Processor = Callable[[list], Any]
Callback = Callable[[Optional[BaseException], Any], Any]


class Signal:
    """A dispatch point with a fixed parameter count and a result processor."""

    def __init__(self, param_count: int, processor: Processor):
        if (
            isinstance(param_count, bool)
            or not isinstance(param_count, int)
            or param_count < 0
        ):
            raise SignalConfigError(
                f"param_count must be a non-negative integer, got {param_count!r}"
            )
        if not callable(processor):
            raise SignalConfigError(f"processor must be callable, got {processor!r}")

        self._param_count = param_count
        self._processor = processor
        self._slots: list[Callable] = []
        # Strong refs so in-flight emission and slot tasks are not garbage collected
        self._tasks: set[asyncio.Task] = set()

    @property
    def param_count(self) -> int:
        return self._param_count

    @property
    def processor(self) -> Processor:
        return self._processor

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, slot) -> bool:
        return any(_same_slot(entry, slot) for entry in self._slots)

    def __repr__(self) -> str:
        return f"<Signal param_count={self._param_count} slots={len(self._slots)}>"

    # ─── Registration ─────────────────────────────────────

    def add(self, slot: Callable) -> None:
        """Register a slot. It must accept param_count args plus done.

        The same slot may be added more than once; each registration
        fires on every emission.
        """
        if not callable(slot):
            raise TypeError(f"Slot must be callable, got {slot!r}")

        expected = self._param_count + 1
        declared = declared_arity(slot)
        if declared != expected:
            raise SlotArityError(slot, declared, expected)

        self._slots.append(slot)
        logger.debug("signal.slot_added", slot=callable_name(slot), count=len(self._slots))

    def remove(self, slot: Callable) -> bool:
        """Remove the most recent registration of slot.

        Returns False (and changes nothing) when slot is not registered.
        """
        for index in range(len(self._slots) - 1, -1, -1):
            if _same_slot(self._slots[index], slot):
                del self._slots[index]
                logger.debug(
                    "signal.slot_removed",
                    slot=callable_name(slot),
                    count=len(self._slots),
                )
                return True
        return False

    def count(self) -> int:
        """Number of registrations, duplicates counted separately."""
        return len(self._slots)

    # ─── Emission ─────────────────────────────────────────

    def emit(self, *args) -> asyncio.Task:
        """Emit to every slot; the last argument is callback(error, outcome).

        Must be called with a running event loop. Returns the emission
        task; the outcome itself only ever reaches the callback.
        """
        expected = self._param_count + 1
        if len(args) != expected:
            raise EmitArgumentCountError(len(args), expected)

        *values, callback = args
        if not callable(callback):
            raise EmitCallbackError(callback)

        loop = asyncio.get_running_loop()
        slots = list(self._slots)
        task = loop.create_task(self._emit_to_callback(slots, tuple(values), callback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def emit_async(self, *args) -> Awaitable[Any]:
        """Emit and await the outcome instead of passing a callback.

        Raises whatever error the callback form would have reported.
        Argument-count misuse still raises at call time, before awaiting.
        """
        if len(args) != self._param_count:
            raise EmitArgumentCountError(
                len(args),
                self._param_count,
                message=(
                    f"Signal must be awaited with {self._param_count} "
                    f"argument(s), got {len(args)}"
                ),
            )
        return self._dispatch(list(self._slots), args)

    async def _emit_to_callback(self, slots, args, callback: Callback):
        try:
            outcome = await self._dispatch(slots, args)
        except Exception as exc:
            callback(exc, None)
            return
        callback(None, outcome)

    async def _dispatch(self, slots, args):
        """Run one emission over a slot snapshot and return the outcome."""
        trace = settings.trace_emissions
        if trace:
            logger.debug("signal.emit_started", slots=len(slots), args=len(args))

        loop = asyncio.get_running_loop()
        # Every slot is started before anything is awaited
        futures = [
            self._start_slot(loop, index, slot, args)
            for index, slot in enumerate(slots)
        ]
        try:
            results = await asyncio.gather(*futures)
        except Exception as exc:
            if trace:
                logger.debug("signal.emit_finished", status="slot_error", error=repr(exc))
            raise

        try:
            outcome = self._processor(list(results))
        except Exception as exc:
            logger.warning("signal.processor_failed", error=repr(exc))
            raise

        if trace:
            logger.debug("signal.emit_finished", status="ok", slots=len(slots))
        return outcome

    def _start_slot(self, loop, index, slot, args) -> asyncio.Future:
        """Invoke one slot and return the future its done() resolves."""
        future = loop.create_future()
        name = callable_name(slot)

        def done(error=None, result=None):
            if future.done():
                if not future.cancelled():
                    logger.warning("signal.slot_done_repeated", slot=name, index=index)
                return
            if error is not None:
                # Futures cannot carry StopIteration, and BaseException-only
                # errors would escape gather instead of reaching the callback
                if not isinstance(error, Exception) or isinstance(error, StopIteration):
                    error = SlotError(error)
                logger.debug("signal.slot_failed", slot=name, index=index, error=repr(error))
                future.set_exception(error)
            else:
                future.set_result(result)

        def fail(exc):
            if future.cancelled():
                return
            # An exception after done() was already called is not an emission error
            if future.done():
                logger.warning(
                    "signal.slot_raised_after_done",
                    slot=name,
                    index=index,
                    error=repr(exc),
                )
                return
            done(exc)

        def on_task_done(task):
            if task.cancelled():
                return
            exc = task.exception()
            if exc is not None:
                fail(exc)

        try:
            returned = slot(*args, done)
        except Exception as exc:
            fail(exc)
        else:
            if inspect.isawaitable(returned):
                slot_task = asyncio.ensure_future(returned)
                self._tasks.add(slot_task)
                slot_task.add_done_callback(self._tasks.discard)
                slot_task.add_done_callback(on_task_done)

        return future


def _same_slot(entry, slot) -> bool:
    if entry is slot:
        return True
    # Bound methods are fresh objects on each attribute access
    return inspect.ismethod(entry) and inspect.ismethod(slot) and entry == slot
