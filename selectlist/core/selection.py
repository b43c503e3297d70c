"""
Selection — an immutable sequence with at most one selected item.

A Selection is the pair (selected_index, items). The index is either None
or a valid position in items; every operation returns a new Selection and
keeps that guarantee:

- select / select_by: point at the first matching position, or leave the
  selection untouched when nothing matches
- deselect: clear the selection
- map / map_selected: rewrite items, position unchanged
- filter: drop items, following the selected item to its new position
  (or clearing the selection if it was dropped)

Selection tracks positions, not values. With duplicate items, the item
that is selected is the one at selected_index, never "every item equal
to it".
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from selectlist.core.handlers import SelectionHandlers
from selectlist.core.logging import LogChannel, get_logger

T = TypeVar("T")
U = TypeVar("U")

log = get_logger(LogChannel.SELECTION)
transform_log = get_logger(LogChannel.TRANSFORM)


class Selection(BaseModel, Generic[T]):
    """
    An ordered, immutable sequence of items with an optional selected item.

    Instances are frozen: use the operations to derive new values. Old
    values stay valid, so callers can keep several snapshots around
    (e.g. an undo history) without them affecting each other.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[T, ...] = Field(default=(), description="Items in order")
    selected_index: Optional[int] = Field(
        default=None,
        description="Position of the selected item, None if nothing is selected",
    )

    @field_validator("items", mode="wrap")
    @classmethod
    def _items_as_given(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> tuple:
        # Stored as given, never coerced to T
        try:
            return tuple(value)
        except TypeError as e:
            raise ValueError(f"items must be iterable, got {type(value).__name__}") from e

    @field_validator("selected_index")
    @classmethod
    def _index_within_items(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        # Any index outside the items means "nothing selected"
        if value is None:
            return None
        items = info.data.get("items")
        if items is None or not 0 <= value < len(items):
            return None
        return value

    # =========================================================================
    # Construction & Extraction
    # =========================================================================

    @classmethod
    def from_list(cls, items: Iterable[T]) -> "Selection[T]":
        """
        Wrap items with nothing selected.

        Items are kept exactly as given, also on a parametrized class:
        Selection[int].from_list(["1"]) holds the string "1".
        """
        return cls(items=tuple(items))

    def to_list(self) -> list[T]:
        """The items as a plain list, without selection info."""
        return list(self.items)

    # =========================================================================
    # Selecting
    # =========================================================================

    def select(self, target: T) -> "Selection[T]":
        """Select the first item equal to target; no-op if there is none."""
        return self.select_by(lambda item: item == target)

    def select_by(self, predicate: Callable[[T], bool]) -> "Selection[T]":
        """
        Select the first item satisfying predicate.

        If no item matches, the current selection (or lack of one) is
        kept as is rather than cleared.
        """
        for index, item in enumerate(self.items):
            if predicate(item):
                if index == self.selected_index:
                    return self
                return self.model_copy(update={"selected_index": index})

        log.debug(
            "select_no_match",
            size=len(self.items),
            kept_index=self.selected_index,
        )
        return self

    def deselect(self) -> "Selection[T]":
        """Clear the selection."""
        if self.selected_index is None:
            return self
        return self.model_copy(update={"selected_index": None})

    def selected(self) -> Optional[T]:
        """
        The selected item, or None if nothing is selected.

        When items may themselves be None, use has_selection() to tell the
        two cases apart.
        """
        if self.selected_index is None:
            return None
        return self.items[self.selected_index]

    def has_selection(self) -> bool:
        return self.selected_index is not None

    def is_selected_at(self, index: int) -> bool:
        return self.selected_index is not None and index == self.selected_index

    # =========================================================================
    # Transforming
    # =========================================================================

    def map(self, fn: Callable[[T], U]) -> "Selection[U]":
        """Apply fn to every item. The selected position is unchanged."""
        return self._derive(
            items=tuple(fn(item) for item in self.items),
            selected_index=self.selected_index,
        )

    def map_selected(
        self,
        handlers: Union[SelectionHandlers[T, U], Mapping[str, Callable[[Any], Any]], None] = None,
        *,
        selected: Optional[Callable[[T], U]] = None,
        rest: Optional[Callable[[T], U]] = None,
    ) -> "Selection[U]":
        """
        Apply one function to the selected item and another to the rest.

        Pass either a SelectionHandlers (or a {"selected", "rest"} mapping)
        or both keyword arguments:

            s.map_selected(selected=str.upper, rest=str.lower)

        Length, order and the selected position are unchanged.
        """
        if handlers is None:
            handlers = SelectionHandlers(selected=selected, rest=rest)
        elif selected is not None or rest is not None:
            raise TypeError("pass either handlers or selected=/rest=, not both")
        else:
            handlers = SelectionHandlers.coerce(handlers)

        return self._derive(
            items=tuple(
                handlers.apply(item, index == self.selected_index)
                for index, item in enumerate(self.items)
            ),
            selected_index=self.selected_index,
        )

    def filter(self, predicate: Callable[[T], bool]) -> "Selection[T]":
        """
        Keep the items satisfying predicate, in order.

        The selected item follows its own position: if it is kept it stays
        selected at its new index, otherwise nothing is selected. An equal
        item elsewhere in the sequence is never selected in its place.
        """
        kept: list[T] = []
        new_index: Optional[int] = None

        for old_index, item in enumerate(self.items):
            if not predicate(item):
                continue
            if old_index == self.selected_index:
                new_index = len(kept)
            kept.append(item)

        if self.selected_index is not None and new_index is None:
            transform_log.verbose(
                "selection_dropped_by_filter",
                previous_index=self.selected_index,
                kept=len(kept),
                removed=len(self.items) - len(kept),
            )

        return self._derive(items=tuple(kept), selected_index=new_index)

    def _derive(self, items: tuple, selected_index: Optional[int]) -> "Selection[Any]":
        # Subclasses keep their class; Selection[int] etc. drop the parameter
        # since the new items may be of another type.
        cls = self.__pydantic_generic_metadata__["origin"] or type(self)
        return cls(items=items, selected_index=selected_index)

    # =========================================================================
    # Sequence protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items
