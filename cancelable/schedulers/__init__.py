from .scheduler_base import SchedulerBase
from .microtask import MicrotaskQueue
from .event_loop import EventLoopScheduler, wrap_future

__all__ = ['SchedulerBase', 'MicrotaskQueue', 'EventLoopScheduler',
           'wrap_future']
