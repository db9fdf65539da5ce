from thunklist import invoke, invoker, ensure_invocable, apply, apply_multi, compose, NonInvocable

import functools
from pytest import raises

def add(x, y):
    return x + y

def square(x):
    return x * x

def divmod_pair(x, y):
    return x // y, x % y

def test_invoke():
    assert invoke(add, 1, 2) == 3
    assert invoke(lambda: 'x') == 'x'
    assert invoke(functools.partial(add, 1), 2) == 3
    assert invoke(max, 3, 7) == 7
    assert invoke(str.upper, 'abc') == 'ABC'

def test_invoke_not_callable():
    with raises(NonInvocable) as info: invoke(5, 1)
    assert info.value.value == 5
    with raises(NonInvocable): invoke(None)

def test_invoke_bad_arguments():
    with raises(NonInvocable): invoke(add, 1)
    with raises(NonInvocable): invoke(add, 1, 2, 3)
    with raises(NonInvocable): invoke(square)

def test_invoke_error_inside_function():
    # Errors from the function itself are not rewrapped
    def broken(x):
        raise TypeError('broken')

    with raises(TypeError, match='broken'): invoke(broken, 1)
    with raises(TypeError): invoke(add, 1, 'a')

def test_ensure_invocable():
    assert ensure_invocable(add) is add
    with raises(NonInvocable): ensure_invocable('add')

def test_apply():
    increment = apply(add, 1)
    assert increment(10) == 11
    assert invoke(increment, 10) == 11
    assert apply(add, 1, 2)() == 3
    assert apply(add)(4, 5) == 9
    with raises(NonInvocable): increment(1, 2)
    with raises(NonInvocable): apply(3)

def test_apply_multi():
    assert apply_multi(divmod_pair, 7)(2) == (3, 1)
    assert apply_multi(divmod)(9, 4) == (2, 1)
    with raises(NonInvocable): apply_multi(add, 1)(2)
    with raises(NonInvocable): apply_multi(lambda: (1, 2, 3))()

def test_compose():
    square_sum = compose(square, add)
    assert square_sum(3, 3) == 36
    assert square_sum.__name__ == 'square_of_add'
    assert compose(str, square)(4) == '16'
    with raises(NonInvocable): compose(square, 1)
    with raises(NonInvocable): compose(add, square)(2)

def test_invoke_decorated():
    # The wrapper's own argument list is what gets called
    def with_default(func):
        @functools.wraps(func)
        def wrapper(x, y=10):
            return func(x, y)
        return wrapper

    add_ten = with_default(add)
    assert invoke(add_ten, 1) == 11
    assert invoker(add_ten, 1) is add_ten
    with raises(NonInvocable): invoker(add, 1)
