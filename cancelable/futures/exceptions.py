class Error(Exception):
    """Base class for all future-related exceptions."""
    pass


class ConstructionError(Error, TypeError):
    """Future was constructed with a non-callable executor."""
    pass


class ValidationError(Error, TypeError):
    """Continuation passed to then() or catch() is not callable."""
    pass


class InvalidStateError(Error):
    """The operation is not allowed in this state."""
    pass


class SchedulerError(Error):
    """The scheduler cannot accept or run more work."""
    pass


class CancelledError(Error):
    """The Future was cancelled.

    Used as the rejection reason of a cancelled Future, so continuations
    receive it through the ordinary rejection path.
    """
    is_cancelled = True

    def __init__(self, message='Future was cancelled'):
        super().__init__(message)


class ExecutionError(Error):
    """A continuation raised while the Future was dispatching.

    Attributes:
        error: exception raised by the continuation.
        is_cancelled: whether the source Future was cancelled at the
        moment the continuation ran.
    """

    def __init__(self, error, is_cancelled=False):
        super().__init__(error)
        self.error = error
        self.is_cancelled = is_cancelled
        self.__cause__ = error

    def __repr__(self):
        return '{}({!r}, is_cancelled={})'.format(
            self.__class__.__name__, self.error, self.is_cancelled)


class RejectedError(Error):
    """Future was rejected with a reason that is not an exception."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason
