from thunklist.node import Thunk

from collections.abc import Iterator


# None of these return on an infinite list.  That is impossible to detect
# up front, so bound the list with take() first.

def iterate(lst: Thunk) -> Iterator:
    node = lst.force()
    while node:
        yield node.head
        node = node.tail.force()


def length(lst: Thunk) -> int:
    count = 0
    for _ in iterate(lst):
        count += 1
    return count


def to_eager_sequence(lst: Thunk) -> list:
    return list(iterate(lst))
