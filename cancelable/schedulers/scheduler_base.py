from ..futures.future import Future
import abc


class SchedulerBase(metaclass=abc.ABCMeta):

    @abc.abstractmethod
    def __call__(self, fn, *args, **kwargs):
        """Same as submit but does not produce future in
        response. This method is intended to allow using
        schedulers for Future dispatch passes"""

    def submit(self, fn, *args, **kwargs):
        """Schedule execution of specified function.

        Returns a Future settled with the function's result, or rejected
        with the exception it raised.
        """
        def run(settle, fail):
            def task():
                try:
                    settle(fn(*args, **kwargs))
                except Exception as ex:
                    fail(ex)

            self(task)

        return Future(run, scheduler=self)

    @abc.abstractmethod
    def shutdown(self, wait=True):
        """Stop scheduler"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False
