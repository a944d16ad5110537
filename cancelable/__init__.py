"""Cancelable asynchronous values for cooperative schedulers."""

from .futures import *
from .schedulers import *
from .config import Default

__all__ = ['Future', 'is_thenable', 'is_cancellation',
           'Error', 'ConstructionError', 'ValidationError', 'ExecutionError',
           'CancelledError', 'InvalidStateError', 'RejectedError',
           'SchedulerError', 'SchedulerBase', 'MicrotaskQueue',
           'EventLoopScheduler', 'wrap_future', 'Default']
