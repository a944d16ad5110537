from cancelable.futures import *
from .test_base import FutureTestBase


class FutureChainingTest(FutureTestBase):
    def test_then(self):
        f = self.future(lambda settle, _: settle(1))
        c = f.then(lambda x: x + 1)

        self.assertFalse(c.done())
        self.run_all()
        self.assertEqual(2, c.result())

    def test_catch(self):
        f = self.future(lambda _, fail: fail('e'))
        c = f.catch(lambda e: e + '!')

        self.run_all()
        self.assertEqual('e!', c.result())

    def test_on_rejected_ignored_when_fulfilled(self):
        c = self.successful(1).then(None, lambda e: 'recovered')

        self.run_all()
        self.assertEqual(1, c.result())

    def test_continuations_are_deferred(self):
        calls = []
        f = self.successful(1)
        self.run_all()

        f.then(calls.append)
        self.assertEqual([], calls)

        self.run_all()
        self.assertEqual([1], calls)

    def test_then_passes_rejection_through(self):
        c = self.failed('e').then(lambda x: x)

        self.run_all()
        self.assertEqual('REJECTED', c.state)
        self.assertEqual('e', c.error())

    def test_catch_passes_value_through(self):
        c = self.successful(5).catch(lambda e: 0)

        self.run_all()
        self.assertEqual(5, c.result())

    def test_then_without_callbacks(self):
        c1 = self.successful(5).then()
        c2 = self.failed('e').then()

        self.run_all()
        self.assertEqual(5, c1.result())
        self.assertEqual('e', c2.error())

    def test_rejection_skips_fulfilled_callbacks(self):
        calls = []
        c = self.failed('e') \
            .then(calls.append) \
            .then(calls.append) \
            .catch(lambda e: e * 2)

        self.run_all()
        self.assertEqual([], calls)
        self.assertEqual('ee', c.result())

    def test_recovered_chain_continues(self):
        c = self.failed('e').catch(lambda e: 1).then(lambda x: x + 1)

        self.run_all()
        self.assertEqual(2, c.result())

    def test_long_chain(self):
        f = self.successful(0)
        for _ in range(10):
            f = f.then(lambda x: x + 1)

        self.run_all()
        self.assertEqual(10, f.result())

    def test_fan_out(self):
        order = []
        f, settle, _ = self.deferred()
        c1 = f.then(lambda x: order.append(('a', x)) or x)
        c2 = f.then(lambda x: order.append(('b', x)) or x)

        settle(7)
        self.run_all()
        self.assertEqual([('a', 7), ('b', 7)], order)
        self.assertEqual(7, c1.result())
        self.assertEqual(7, c2.result())

    def test_fan_out_rejection(self):
        f, _, fail = self.deferred()
        c1 = f.catch(lambda e: ('a', e))
        c2 = f.then(lambda x: x)

        fail('e')
        self.run_all()
        self.assertEqual(('a', 'e'), c1.result())
        self.assertEqual('e', c2.error())

    def test_late_subscriber(self):
        f = self.successful(3)
        c1 = f.then(lambda x: x)
        self.run_all()

        c2 = f.then(lambda x: x * 2)
        self.assertFalse(c2.done())
        self.run_all()
        self.assertEqual(3, c1.result())
        self.assertEqual(6, c2.result())

    def test_callback_raising(self):
        ex = ValueError('boom')
        c = self.successful(1).then(lambda x: self._raise(ex))

        self.run_all()
        err = c.error()
        self.assertIsInstance(err, ExecutionError)
        self.assertIs(ex, err.error)
        self.assertIs(ex, err.__cause__)
        self.assertFalse(err.is_cancelled)

    def test_on_rejected_raising(self):
        c = self.failed('e').catch(lambda e: self._raise(KeyError(e)))

        self.run_all()
        self.assertIsInstance(c.error(), ExecutionError)
        self.assertIsInstance(c.error().error, KeyError)
        self.assertRaises(ExecutionError, c.result)

    def test_raising_callback_does_not_stop_dispatch(self):
        f = self.successful(1)
        c1 = f.then(lambda x: self._raise(TypeError()))
        c2 = f.then(lambda x: x + 1)

        self.run_all()
        self.assertIsInstance(c1.error(), ExecutionError)
        self.assertEqual(2, c2.result())

    def test_callback_returning_future(self):
        c = self.successful(1).then(lambda x: self.successful(x * 10))

        self.run_all()
        self.assertEqual(10, c.result())

    def test_callback_returning_rejected_future(self):
        c = self.successful(1).then(lambda x: self.failed('e'))

        self.run_all()
        self.assertEqual('e', c.error())

    def test_children_inherit_scheduler(self):
        f = self.successful(1)
        f.then(lambda x: x).then(lambda x: x)
        self.assertGreater(self.scheduler.pending, 0)
        self.run_all()
        self.assertEqual(0, self.scheduler.pending)

    def test_validation(self):
        f = self.successful(1)
        self.run_all()

        self.assertRaises(ValidationError, f.then, 1)
        self.assertRaises(ValidationError, f.then, None, 'x')
        self.assertRaises(ValidationError, f.then, lambda x: x, 2)
        self.assertRaises(ValidationError, f.catch, 3)
        self.assertRaises(TypeError, f.catch, 'x')
        self.assertEqual(0, self.scheduler.pending)


if __name__ == '__main__':
    import unittest

    unittest.main()
