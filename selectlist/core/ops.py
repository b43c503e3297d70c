"""
Functional API — data-last wrappers around the Selection methods.

Every function takes the Selection as its last argument, so operations
compose with functools.partial:

    from functools import partial
    from selectlist.core import ops

    pick_burrito = partial(ops.select, "Burrito")
    ops.selected(pick_burrito(ops.from_list(menu)))

The names `map` and `filter` shadow the builtins inside this module; import
the module rather than the names.
"""

from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar, Union

from selectlist.core.handlers import SelectionHandlers
from selectlist.core.selection import Selection

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "from_list",
    "to_list",
    "select",
    "select_by",
    "deselect",
    "selected",
    "map",
    "map_selected",
    "filter",
    "pipe",
]


def from_list(items: Iterable[T]) -> Selection[T]:
    """Wrap items with nothing selected."""
    return Selection.from_list(items)


def to_list(selection: Selection[T]) -> list[T]:
    return selection.to_list()


def select(target: T, selection: Selection[T]) -> Selection[T]:
    return selection.select(target)


def select_by(predicate: Callable[[T], bool], selection: Selection[T]) -> Selection[T]:
    return selection.select_by(predicate)


def deselect(selection: Selection[T]) -> Selection[T]:
    return selection.deselect()


def selected(selection: Selection[T]) -> Optional[T]:
    return selection.selected()


def map(fn: Callable[[T], U], selection: Selection[T]) -> Selection[U]:
    return selection.map(fn)


def map_selected(
    handlers: Union[SelectionHandlers[T, U], Mapping[str, Callable[[Any], Any]]],
    selection: Selection[T],
) -> Selection[U]:
    return selection.map_selected(handlers)


def filter(predicate: Callable[[T], bool], selection: Selection[T]) -> Selection[T]:
    return selection.filter(predicate)


def pipe(value: Any, *steps: Callable[[Any], Any]) -> Any:
    """
    Feed value through steps left to right.

        pipe(from_list([1, 2, 3]), partial(select, 2), selected)  # -> 2
    """
    for step in steps:
        value = step(value)
    return value
