"""List to list operations.

map, take and drop are lazy: they return a new Thunk immediately and only
do work on the underlying list when that Thunk (or one of its tails) is
forced.  reduce is strict and walks the whole list.
"""

from thunklist.node import Node, Thunk, END, EMPTY
from thunklist.calls import invoker
from thunklist.consume import iterate

import typing as ty

A = ty.TypeVar('A')
B = ty.TypeVar('B')


def map(lst: Thunk[A], func: ty.Callable[[A], B]) -> Thunk[B]:
    return _mapped(lst, invoker(func, 1))

def _mapped(lst, func):
    def force():
        node = lst.force()
        if not node:
            return node
        return Node(func(node.head), _mapped(node.tail, func))
    return Thunk(force)


def reduce(lst: Thunk[A], func: ty.Callable[[B, A], B], initial: B) -> B:
    func = invoker(func, 2)
    acc = initial
    for value in iterate(lst):
        acc = func(acc, value)
    return acc


def take(lst: Thunk[A], n: int) -> Thunk[A]:
    if n <= 0:
        return EMPTY

    def force():
        node = lst.force()
        if not node:
            return node
        return Node(node.head, take(node.tail, n - 1))
    return Thunk(force)


def drop(lst: Thunk[A], n: int) -> Thunk[A]:
    def force():
        cur = lst
        for _ in range(n):
            node = cur.force()
            if not node:
                return END
            cur = node.tail
        return cur.force()
    return Thunk(force)


def memoize(lst: Thunk[A]) -> Thunk[A]:
    return lst.memoize()
