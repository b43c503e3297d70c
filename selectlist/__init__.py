"""
selectlist — a list with at most one selected item.

An immutable value type for application state that needs "a list plus an
optional current item", where the current item is guaranteed to be one
of the list's items.
"""

__version__ = "0.1.0"

from selectlist.core import Selection, SelectionHandlers  # noqa: E402
from selectlist.core.ops import from_list, to_list  # noqa: E402

__all__ = ["Selection", "SelectionHandlers", "from_list", "to_list", "__version__"]
