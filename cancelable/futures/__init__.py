"""Cancelable futures with chained continuations."""

from .future import Future
from .thenable import is_thenable, is_cancellation
from .exceptions import (Error, ConstructionError, ValidationError,
                         ExecutionError, CancelledError, InvalidStateError,
                         RejectedError, SchedulerError)

__all__ = ['Future', 'is_thenable', 'is_cancellation',
           'Error', 'ConstructionError', 'ValidationError', 'ExecutionError',
           'CancelledError', 'InvalidStateError', 'RejectedError',
           'SchedulerError']
