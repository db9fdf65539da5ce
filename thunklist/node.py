from thunklist.errors import InvalidInput

import dataclasses as dc
import typing as ty
from collections.abc import Callable

T = ty.TypeVar('T')


@dc.dataclass(frozen=True)
class Node(ty.Generic[T]):
    __slots__ = 'head', 'tail'
    head: T
    tail: 'Thunk[T]'

    def __bool__(self):
        return True


class End:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'END'

    def __bool__(self):
        return False

END = End()


class Thunk(ty.Generic[T]):
    """A deferred list position.

    Forcing a thunk runs its producer and returns either a Node or END.
    Nothing is cached, so every force re-runs the producer (see Memo for
    the caching variant).
    """
    __slots__ = '_force',

    def __init__(self, force: Callable[[], 'Node[T] | End']):
        self._force = force

    def force(self) -> 'Node[T] | End':
        return self._force()

    def __call__(self):
        return self.force()

    def __iter__(self):
        from thunklist.consume import iterate
        return iterate(self)

    def __repr__(self):
        return f'<{type(self).__name__} ...>'

    # Fluent versions of the module level operations
    def map(self, func):
        from thunklist.combinators import map
        return map(self, func)

    def take(self, n):
        from thunklist.combinators import take
        return take(self, n)

    def drop(self, n):
        from thunklist.combinators import drop
        return drop(self, n)

    def reduce(self, func, initial):
        from thunklist.combinators import reduce
        return reduce(self, func, initial)

    def memoize(self):
        return Memo(self)

    def length(self):
        from thunklist.consume import length
        return length(self)

    def to_list(self):
        from thunklist.consume import to_eager_sequence
        return to_eager_sequence(self)


class Memo(Thunk[T]):
    __slots__ = '_node', '_error'

    def __init__(self, source: Thunk[T]):
        super().__init__(source.force)
        self._node = None
        self._error = None

    def force(self):
        # Drop the producer once forced so the source chain can be collected.
        # A failed force is remembered and re-raised.
        if self._error is not None:
            raise self._error
        if self._force is not None:
            try:
                node = self._force()
            except Exception as err:
                self._error = err
                self._force = None
                raise
            self._node = Node(node.head, node.tail.memoize()) if node else node
            self._force = None
        return self._node

    def memoize(self):
        return self

    def __repr__(self):
        if self._force is not None:
            return '<Memo ...>'
        if self._error is not None:
            return f'<Memo error={self._error!r}>'
        if not self._node:
            return '<Memo END>'
        # Only the head: the tail chain may be arbitrarily long
        return f'<Memo head={self._node.head!r} ...>'


def cons(head: T, tail: Thunk[T]) -> Thunk[T]:
    if not isinstance(tail, Thunk):
        raise InvalidInput.not_thunk(tail)
    return Thunk(lambda: Node(head, tail))


EMPTY: Thunk[ty.Any] = Thunk(lambda: END)
