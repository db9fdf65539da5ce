from thunklist.node import Node, Thunk, Memo, END, EMPTY, cons
from thunklist.calls import invoker
from thunklist.errors import InvalidInput

from collections.abc import Sequence


def from_eager_sequence(elements):
    if not isinstance(elements, Sequence):
        raise InvalidInput.not_sequence(elements)

    lst = EMPTY
    for value in reversed(elements):
        lst = cons(value, lst)
    return lst


def from_sequence(*elements):
    return from_eager_sequence(elements)


def generate(seed, successor):
    return _generated(seed, invoker(successor, 1))

def _generated(seed, successor):
    return Thunk(lambda: Node(seed, _successor_of(seed, successor)))

def _successor_of(seed, successor):
    return Thunk(lambda: _generated(successor(seed), successor).force())


def from_iterable(iterable):
    # An iterator can only be read once, so every position must remember
    # what it pulled out of it
    return Memo(Thunk(IteratorProducer(iter(iterable))))


class IteratorProducer:
    def __init__(self, iterator):
        self._iterator = iterator

    def __call__(self):
        try:
            head = next(self._iterator)
        except StopIteration:
            return END
        return Node(head, Thunk(self))

    def __repr__(self):
        return '...'
