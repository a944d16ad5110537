from .futures.exceptions import CancelledError
import traceback
import logging

logger = logging.getLogger(__package__)


def log_error_handler(cls, tb):
    logger.error('Unhandled Future failure:\n%s', ''.join(tb))


class Default(object):
    # Called when a rejection was not observed by any continuation
    # or when a scheduled task raised
    UNHANDLED_FAILURE_CALLBACK = staticmethod(log_error_handler)

    # Default scheduler for Future dispatch passes
    SCHEDULER = None

    @staticmethod
    def get_scheduler():
        if Default.SCHEDULER is None:
            from .schedulers.microtask import MicrotaskQueue

            Default.SCHEDULER = MicrotaskQueue()
        return Default.SCHEDULER

    @staticmethod
    def on_unhandled_error(exc):
        tb = traceback.format_exception(exc.__class__, exc,
                                        exc.__traceback__)
        Default.UNHANDLED_FAILURE_CALLBACK(exc.__class__, tb)

    @staticmethod
    def on_unhandled_rejection(reason):
        if isinstance(reason, CancelledError):
            return
        if isinstance(reason, BaseException):
            Default.on_unhandled_error(reason)
        else:
            Default.UNHANDLED_FAILURE_CALLBACK(
                reason.__class__, ['{!r}\n'.format(reason)])
