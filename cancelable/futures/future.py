from .future_core import FutureCore, _PENDING, _FULFILLED
from .exceptions import ConstructionError, ValidationError, ExecutionError
from collections import namedtuple


_Continuation = namedtuple('_Continuation', ['on_fulfilled', 'on_rejected',
                                             'settle_child', 'fail_child'])


class Future(FutureCore):
    """Cancelable asynchronous value.

    The executor is called synchronously with two callables, ``settle`` and
    ``fail``, one of which it should eventually call. Continuations attached
    with ``then`` and ``catch`` always run later, on a dispatch pass
    scheduled through the future's scheduler.
    """

    def __init__(self, executor, *, scheduler=None):
        """Initializes future instance.

        Args:
            executor: callable accepting ``settle`` and ``fail`` arguments.
            scheduler: callable used to schedule dispatch passes
            (by default ``config.Default.get_scheduler()``).

        Raises:
            ConstructionError: if executor is not callable.
            Exception: whatever the executor raises is propagated.
        """
        if not callable(executor):
            raise ConstructionError(
                'Future expects callable executor, got {!r}'.format(executor))

        super().__init__(scheduler=scheduler)
        self._continuations = []
        executor(self._settle, self._fail)

    @classmethod
    def successful(cls, value=None, *, scheduler=None):
        """Returns future settled with provided value.

        Thenable values are adopted, so the returned future may stay
        pending until the thenable settles.
        """
        return cls(lambda settle, _: settle(value), scheduler=scheduler)

    @classmethod
    def failed(cls, reason, *, scheduler=None):
        """Returns future rejected with provided reason."""
        return cls(lambda _, fail: fail(reason), scheduler=scheduler)

    def then(self, on_fulfilled=None, on_rejected=None):
        """Returns future which will be settled from the outcome of this one.

        If this future is fulfilled, the child is settled with the result of
        ``on_fulfilled`` (or with the same value when it is omitted). If this
        future is rejected, the child is settled with the result of
        ``on_rejected``, or rejected with the same reason when it is omitted.
        A callback that raises rejects the child with ``ExecutionError``.

        Cancelling the returned future cancels this one as well.

        Args:
            on_fulfilled: function that accepts the value.
            on_rejected: function that accepts the rejection reason.

        Raises:
            ValidationError: if a provided argument is not callable.
        """
        _check_callable('then', 'on_fulfilled', on_fulfilled)
        _check_callable('then', 'on_rejected', on_rejected)
        return self._chain(on_fulfilled, on_rejected)

    def catch(self, on_rejected=None):
        """Same as ``then(None, on_rejected)``."""
        _check_callable('catch', 'on_rejected', on_rejected)
        return self._chain(None, on_rejected)

    def _chain(self, on_fulfilled, on_rejected):
        def subscribe(settle_child, fail_child):
            self._continuations.append(_Continuation(
                on_fulfilled, on_rejected, settle_child, fail_child))

        child = self._new(subscribe)
        child._parent = self
        self._rejection_handled = True
        self._schedule_dispatch()
        return child

    def _new(self, executor):
        return type(self)(executor, scheduler=self._scheduler)

    #override
    def _on_result_set(self):
        self._schedule_dispatch()

    def _schedule_dispatch(self):
        self._scheduler(self._dispatch)

    def _dispatch(self):
        if self._state == _PENDING or not self._continuations:
            return

        continuations = self._continuations[:]
        self._continuations[:] = []
        for clb in continuations:
            self._run_continuation(clb)

    def _run_continuation(self, clb):
        try:
            if self._state == _FULFILLED:
                if clb.on_fulfilled is not None:
                    clb.settle_child(clb.on_fulfilled(self._value))
                else:
                    clb.settle_child(self._value)
            elif clb.on_rejected is not None:
                clb.settle_child(clb.on_rejected(self._error))
            else:
                clb.fail_child(self._error)
        except Exception as ex:
            clb.fail_child(ExecutionError(ex, self._cancelled))

    def __repr__(self):
        res = self.__class__.__name__
        if self._state == _FULFILLED:
            res += '<value={!r}>'.format(self._value)
        elif self._state != _PENDING:
            res += '<error={!r}>'.format(self._error)
        elif self._continuations:
            res += '<{}, {} continuations>'.format(
                self._state, len(self._continuations))
        else:
            res += '<{}>'.format(self._state)
        return res


def _check_callable(method, name, fn):
    if fn is not None and not callable(fn):
        raise ValidationError('Future.{} expects callable or None as {}, '
                              'got {!r}'.format(method, name, fn))
