"""
Core — the Selection value type, its handlers, and the functional API.
"""

from selectlist.core.handlers import SelectionHandlers
from selectlist.core.selection import Selection

__all__ = ["Selection", "SelectionHandlers"]
