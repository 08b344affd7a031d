"""Iterate over the individual steps of a traversal."""
from typing import Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


def steps(iterable: Iterable[T]) -> Iterator[Tuple[T, T]]:
    """Yield ``(previous, current)`` pairs from a traversal.

    Every line traversal in this package has a ``steps()`` method returning
    this iterator. For ``WalkGrid((0, 0), (2, 1))``::

        (0, 0) -> (1, 0)
        (1, 0) -> (1, 1)
        (1, 1) -> (2, 1)

    A traversal with fewer than two elements yields nothing.
    """
    iterator = iter(iterable)
    for previous in iterator:
        break
    else:
        return
    for current in iterator:
        yield previous, current
        previous = current
