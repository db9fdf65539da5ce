"""Calling caller-supplied function values.

The list combinators never call user functions directly; they go through
invoke() or invoker() so that a value which can't be called with the given arguments is
reported as NonInvocable instead of surfacing as an unrelated TypeError from
deep inside a forced thunk.
"""

from thunklist.errors import NonInvocable

import inspect


def ensure_invocable(func):
    if not callable(func):
        raise NonInvocable.not_callable(func)
    return func


def _check_arguments(func, args):
    try:
        signature = inspect.signature(func, follow_wrapped=False)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature, just call them
        return
    try:
        signature.bind(*args)
    except TypeError as err:
        raise NonInvocable.bad_arguments(func, count=len(args), reason=err) from err


def invoker(func, count):
    # Checks once that func takes count positional arguments, for callers
    # that go on to call it many times with that shape
    ensure_invocable(func)
    _check_arguments(func, (None,) * count)
    return func


def invoke(func, *args):
    ensure_invocable(func)
    _check_arguments(func, args)
    return func(*args)


def apply(func, *args):
    ensure_invocable(func)

    def applied(*more):
        return invoke(func, *args, *more)
    return applied


def apply_multi(func, *args):
    ensure_invocable(func)

    def applied(*more):
        result = invoke(func, *args, *more)
        try:
            first, second = result
        except (TypeError, ValueError):
            raise NonInvocable.not_pair(result) from None
        return first, second
    return applied


def compose(outer, inner):
    ensure_invocable(outer)
    ensure_invocable(inner)

    def composed(*args):
        return invoke(outer, invoke(inner, *args))
    composed.__name__ = f'{getattr(outer, "__name__", "outer")}_of_{getattr(inner, "__name__", "inner")}'
    return composed
