from .exceptions import CancelledError, InvalidStateError, RejectedError
from .thenable import is_thenable
from ..config import Default
from collections import deque
import logging

logger = logging.getLogger(__name__)


# States for Future.
_PENDING = 'PENDING'
_FULFILLED = 'FULFILLED'
_REJECTED = 'REJECTED'


class FutureCore(object):
    """Encapsulates Future state and settlement rules.

    A future leaves the pending state at most once through ``_settle`` or
    ``_fail``. Only ``cancel`` may change the outcome afterwards.
    """

    _state = _PENDING
    _value = None
    _error = None
    _cancelled = False
    _parent = None
    _adopting = None
    _rejection_handled = False

    def __init__(self, *, scheduler=None):
        if scheduler is None:
            scheduler = Default.get_scheduler()
        self._scheduler = scheduler

    def __del__(self):
        if self._state == _REJECTED and not self._rejection_handled:
            Default.on_unhandled_rejection(self._error)

    def _settle(self, value):
        if self._state != _PENDING:
            return
        if self._adopting is not None:
            # called back synchronously from within an adopted then()
            self._adopting.append((True, value))
            return

        self._adopting = deque([(True, value)])
        try:
            while self._adopting and self._state == _PENDING:
                fulfilled, value = self._adopting.popleft()
                if not fulfilled:
                    self._set_state(_REJECTED, None, value)
                elif not is_thenable(value):
                    self._set_state(_FULFILLED, value, None)
                else:
                    self._adopt(value)
        finally:
            self._adopting = None

    def _adopt(self, thenable):
        try:
            thenable.then(self._settle, self._fail)
        except Exception as ex:
            if not self._adopting and self._state == _PENDING:
                self._set_state(_REJECTED, None, ex)

    def _fail(self, reason):
        if self._state != _PENDING:
            return
        if self._adopting is not None:
            self._adopting.append((False, reason))
            return
        self._set_state(_REJECTED, None, reason)

    def _set_state(self, state, value, error):
        self._state = state
        self._value = value
        self._error = error
        self._on_result_set()

    #virtual
    def _on_result_set(self):
        pass

    def cancel(self):
        """Cancels the future and everything it was derived from.

        The cancellation is first propagated to the parent future (if this
        one was produced by chaining), then this future is forced into the
        rejected state with ``CancelledError``, overriding any outcome it
        already had.
        """
        lineage = []
        f = self
        while f is not None:
            lineage.append(f)
            f = f._parent

        # root first, so every parent is cancelled before its child
        for f in reversed(lineage):
            f._force_cancel()

    def _force_cancel(self):
        logger.debug('Cancelling %r', self)
        self._cancelled = True
        self._state = _REJECTED
        self._value = None
        self._error = CancelledError()
        self._on_result_set()

    @property
    def is_cancelled(self):
        """Returns True if cancellation of the future was requested."""
        return self._cancelled

    @property
    def state(self):
        return self._state

    def done(self):
        """Returns True if the future is fulfilled, rejected or cancelled."""
        return self._state != _PENDING

    def result(self):
        """Return the value this future was fulfilled with.

        If the future is still pending, raises InvalidStateError. If the
        future was rejected, raises the rejection reason, or RejectedError
        when the reason is not an exception.
        """
        if self._state == _PENDING:
            raise InvalidStateError('Result is not ready.')
        if self._state == _REJECTED:
            self._rejection_handled = True
            if isinstance(self._error, BaseException):
                raise self._error
            raise RejectedError(self._error)
        return self._value

    def error(self):
        """Return the reason this future was rejected with.

        Returns None if the future was fulfilled. If the future is still
        pending, raises InvalidStateError.
        """
        if self._state == _PENDING:
            raise InvalidStateError('Error is not set.')
        self._rejection_handled = True
        return self._error
