"""
Tests for the data-last functional API.

The scenarios are written as pipelines, the way application code is
expected to chain operations.
"""

from functools import partial

import pytest

from selectlist import from_list, to_list
from selectlist.core import ops
from selectlist.core.handlers import SelectionHandlers


MENU = ["Burrito", "Chicken Wrap", "Taco Salad"]


def identity(x):
    return x


# =============================================================================
# Scenarios
# =============================================================================

class TestScenarios:
    """End-to-end pipelines over the functional API."""

    def test_select_existing(self):
        result = ops.pipe(from_list(MENU), partial(ops.select, "Burrito"), ops.selected)
        assert result == "Burrito"

    def test_select_missing(self):
        result = ops.pipe(from_list(MENU), partial(ops.select, "Doner Kebab"), ops.selected)
        assert result is None

    def test_select_by_prefix(self):
        result = ops.pipe(
            from_list(MENU),
            partial(ops.select_by, lambda x: x.startswith("B")),
            ops.selected,
        )
        assert result == "Burrito"

    def test_map_doubles(self):
        result = ops.pipe(from_list([1, 2, 3]), partial(ops.map, lambda x: x * 2), to_list)
        assert result == [2, 4, 6]

    def test_map_selected_first_duplicate(self):
        handlers = SelectionHandlers(selected=lambda x: x * 2, rest=identity)
        result = ops.pipe(
            from_list([1, 2, 2]),
            partial(ops.select, 2),
            partial(ops.map_selected, handlers),
            to_list,
        )
        assert result == [1, 4, 2]

    def test_filter_keeps_selection(self):
        result = ops.pipe(
            from_list([1, 2, 3]),
            partial(ops.select, 2),
            partial(ops.filter, lambda x: x <= 2),
            ops.selected,
        )
        assert result == 2


# =============================================================================
# Properties
# =============================================================================

class TestProperties:
    """Properties that must hold for any input."""

    @pytest.mark.parametrize("items", [[], [1], [3, 1, 2], ["a", "a", "b"]])
    def test_deselect_idempotent(self, items):
        s = ops.select(items[0], from_list(items)) if items else from_list(items)
        once = ops.deselect(s)
        assert ops.deselect(once) == once

    @pytest.mark.parametrize("target", MENU + ["Doner Kebab", ""])
    def test_select_round_trip_unique(self, target):
        s = ops.select(target, from_list(MENU))
        if target in MENU:
            assert ops.selected(s) == target
        else:
            assert ops.selected(s) is None

    def test_select_by_lowest_index(self):
        s = ops.select_by(lambda x: len(x) > 7, from_list(MENU))
        assert ops.selected(s) == "Chicken Wrap"

    @pytest.mark.parametrize("fn", [str, lambda x: x * x, lambda x: -x])
    def test_map_consistent_with_list_map(self, fn):
        s = ops.select(3, from_list([1, 2, 3, 4]))
        mapped = ops.map(fn, s)
        assert to_list(mapped) == [fn(x) for x in [1, 2, 3, 4]]
        assert ops.selected(mapped) == fn(3)

    @pytest.mark.parametrize("selected_value", [1, 2, 3, 4])
    def test_filter_survival(self, selected_value):
        keep = lambda x: x % 2 == 0
        s = ops.filter(keep, ops.select(selected_value, from_list([1, 2, 3, 4])))
        if keep(selected_value):
            assert ops.selected(s) == selected_value
        else:
            assert ops.selected(s) is None

    def test_map_selected_applies_at_one_position(self):
        items = [0, 0, 0, 0]
        s = ops.select_by(lambda x: True, from_list(items))
        out = to_list(ops.map_selected({"selected": lambda x: 1, "rest": identity}, s))
        assert out == [1, 0, 0, 0]
        assert len(out) == len(items)


class TestPipe:
    def test_no_steps_returns_value(self):
        s = from_list([1])
        assert ops.pipe(s) is s

    def test_steps_run_in_order(self):
        assert ops.pipe(2, lambda x: x + 1, lambda x: x * 10) == 30
