"""
Timing helpers: debouncing, async delays and error-tuple awaiting.
"""

import asyncio
import functools
import threading
from typing import Any, Awaitable, Callable, Optional, Tuple


class Debounced:
    """
    Callable wrapper that delays calls to func until calls stop for wait_ms.

    Every call restarts the countdown; when it runs out, func is invoked
    once with the arguments of the most recent call. The call happens on a
    background timer thread.
    """

    def __init__(self, func: Callable[..., Any], wait_ms: float):
        self.func = func
        self.wait_ms = wait_ms
        self.lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        functools.update_wrapper(self, func, updated=())

    @property
    def pending(self) -> bool:
        """True while a call is scheduled but has not run yet."""
        with self.lock:
            return self._timer is not None

    def __call__(self, *args, **kwargs) -> None:
        with self.lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = threading.Timer(
                self.wait_ms / 1000, self._run, (self._generation, args, kwargs)
            )
            self._timer.daemon = True
            self._timer.start()

    def _run(self, generation: int, args: tuple, kwargs: dict) -> None:
        with self.lock:
            # A newer call superseded this one after the timer fired
            if generation != self._generation:
                return
            self._timer = None
        self.func(*args, **kwargs)

    def cancel(self):
        """Drop the scheduled call, if any."""
        with self.lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def debounce(func: Callable[..., Any], wait_ms: float) -> Debounced:
    """Wrap func so it only runs once calls have stopped for wait_ms milliseconds."""
    return Debounced(func, wait_ms)


async def wait(ms: float) -> None:
    """Sleep for ms milliseconds without blocking the event loop."""
    await asyncio.sleep(ms / 1000)


async def catchy(awaitable: Awaitable[Any]) -> Tuple[Any, Optional[Exception]]:
    """
    Await something and return the outcome as a (value, error) pair.

        value, error = await catchy(load_settings())
        if error:
            ...

    Returns:
        (value, None) on success, (None, exception) if it raised
    """
    try:
        return await awaitable, None
    except Exception as e:
        return None, e
