from collections.abc import Iterable
from typing import AbstractSet, TypeVar

T = TypeVar('T')


# Either side being empty means there is nothing to intersect, which is what
# makes an empty-but-present `include` filter exclude every node.
def has_intersection(a: AbstractSet[T], b: AbstractSet[T]) -> bool:
    if not a or not b:
        return False
    if len(b) < len(a):
        a, b = b, a
    return any(item in b for item in a)


def set_difference(set1: AbstractSet[T], set2: AbstractSet[T]) -> set[T]:
    return {value for value in set1 if value not in set2}


def intersect_sets(sets: Iterable[AbstractSet[T]]) -> set[T]:
    iterator = iter(sets)
    first = next(iterator, None)
    if first is None:
        return set()

    result = set(first)
    for other in iterator:
        result.intersection_update(other)
        # nothing can be added back once the intersection is empty
        if not result:
            break

    return result
