from .scheduler_base import SchedulerBase
from ..futures.exceptions import RejectedError, SchedulerError
import asyncio
import functools


class EventLoopScheduler(SchedulerBase):
    """Runs Future dispatch passes on an asyncio event loop."""

    def __init__(self, loop=None):
        self._loop = loop or _get_loop()

    @property
    def loop(self):
        return self._loop

    def __call__(self, fn, *args, **kwargs):
        if self._loop is None:
            raise SchedulerError('Scheduler was shut down')
        if kwargs:
            fn = functools.partial(fn, **kwargs)
        self._loop.call_soon(fn, *args)

    def shutdown(self, wait=True):
        self._loop = None


def wrap_future(fut, *, loop=None):
    """Wrap Future object into asyncio.Future so it can be awaited.

    Cancelling the returned asyncio future cancels the wrapped one.
    """
    if loop is None:
        loop = _get_loop()
    new_future = loop.create_future()

    def on_fulfilled(value):
        if not new_future.done():
            new_future.set_result(value)

    def on_rejected(reason):
        if new_future.done():
            return
        if not isinstance(reason, Exception):
            reason = RejectedError(reason)
        new_future.set_exception(reason)

    def backprop_cancel(f):
        if f.cancelled():
            fut.cancel()

    fut.then(on_fulfilled, on_rejected)
    new_future.add_done_callback(backprop_cancel)
    return new_future


def _get_loop():
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        raise SchedulerError('No running event loop, pass loop explicitly') from None
