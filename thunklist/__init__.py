from .errors import ThunkListError, InvalidInput, NonInvocable
from .node import Node, End, END, Thunk, Memo, EMPTY, cons
from .construct import from_eager_sequence, from_sequence, from_iterable, generate
from .consume import iterate, length, to_eager_sequence
from .combinators import map, reduce, take, drop, memoize
from .calls import invoke, invoker, ensure_invocable, apply, apply_multi, compose
