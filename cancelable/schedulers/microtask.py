from .scheduler_base import SchedulerBase
from ..futures.exceptions import SchedulerError
from ..config import Default
from collections import deque
import logging

logger = logging.getLogger(__name__)


class MicrotaskQueue(SchedulerBase):
    """Cooperative FIFO queue of deferred calls.

    Scheduling only enqueues the call. Nothing runs until the owner of the
    queue drains it with ``run_once`` or ``run_until_idle``, so every
    scheduled call runs after the synchronous code that scheduled it.
    """

    def __init__(self):
        self._tasks = deque()
        self._closed = False

    def __call__(self, fn, *args, **kwargs):
        if self._closed:
            raise SchedulerError('Cannot schedule on a shut down queue')
        self._tasks.append((fn, args, kwargs))

    @property
    def pending(self):
        """Number of calls waiting to run."""
        return len(self._tasks)

    def run_once(self):
        """Runs the oldest scheduled call.

        Returns:
            False if the queue was empty, True otherwise.
        """
        if not self._tasks:
            return False
        fn, args, kwargs = self._tasks.popleft()
        try:
            fn(*args, **kwargs)
        except Exception as ex:
            Default.on_unhandled_error(ex)
        return True

    def run_until_idle(self, limit=None):
        """Runs scheduled calls until the queue is empty.

        Calls scheduled while draining are run in the same pass.

        Args:
            limit: maximum number of calls to run (default - unlimited).

        Returns:
            Number of calls that were run.

        Raises:
            SchedulerError: if the queue is still not empty after running
            ``limit`` calls.
        """
        count = 0
        while self._tasks:
            if limit is not None and count >= limit:
                raise SchedulerError(
                    'Queue not idle after {} calls'.format(count))
            self.run_once()
            count += 1
        return count

    def shutdown(self, wait=True):
        if wait:
            self.run_until_idle()
        elif self._tasks:
            logger.debug('Discarding %d scheduled calls', len(self._tasks))
            self._tasks.clear()
        self._closed = True

    def __repr__(self):
        return '{}<pending={}>'.format(self.__class__.__name__, len(self._tasks))
