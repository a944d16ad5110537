import inspect


def is_thenable(value):
    """Check if a value should be adopted rather than stored.

    A value is adoptable when it exposes a callable ``then`` attribute that
    can be called with two positional arguments (``on_fulfilled`` and
    ``on_rejected``). Classes are never adoptable, only their instances.

    Returns:
        True if the value is a thenable, False if it is a plain value.
    """
    if value is None or isinstance(value, type):
        return False
    then = getattr(value, 'then', None)
    if not callable(then):
        return False
    return _accepts_two_args(then)


def is_cancellation(reason):
    """Check if a rejection reason represents cancellation."""
    return bool(getattr(reason, 'is_cancelled', False))


def _accepts_two_args(fn):
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins and extension callables may not expose a signature
        return True
    try:
        sig.bind(None, None)
    except TypeError:
        return False
    return True
