"""
Selection Handlers — the function pair used by map_selected.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class SelectionHandlers(Generic[T, U]):
    """
    Functions applied by ``Selection.map_selected``.

    ``selected`` is applied to the selected item only, ``rest`` to every
    other item. Both must return the same kind of value so the result is
    a homogeneous sequence.
    """

    selected: Callable[[T], U]
    rest: Callable[[T], U]

    def __post_init__(self) -> None:
        for name in ("selected", "rest"):
            if not callable(getattr(self, name)):
                raise TypeError(f"SelectionHandlers.{name} must be callable")

    def apply(self, item: T, is_selected: bool) -> U:
        """Apply the handler matching the item's selection state."""
        if is_selected:
            return self.selected(item)
        return self.rest(item)

    @classmethod
    def flagged(cls) -> "SelectionHandlers[T, tuple[T, bool]]":
        """Handlers that pair every item with its "is selected" flag."""
        return cls(selected=lambda item: (item, True), rest=lambda item: (item, False))

    @classmethod
    def coerce(
        cls,
        handlers: Union["SelectionHandlers[T, U]", Mapping[str, Callable[[Any], Any]]],
    ) -> "SelectionHandlers[T, U]":
        """Accept either a SelectionHandlers or a {"selected", "rest"} mapping."""
        if isinstance(handlers, SelectionHandlers):
            return handlers
        try:
            return cls(selected=handlers["selected"], rest=handlers["rest"])
        except KeyError as e:
            raise TypeError(f"handlers mapping is missing key {e}") from e
