"""
Errors - Contract violations raised by the engine and the search.

All of these signal a caller mistake, not a transient condition. They are
raised at the component boundary before any state changes and are never
recovered from mid-search.
"""


class Jump61Error(ValueError):
    """Base class for engine and search contract violations."""


class IllegalMoveError(Jump61Error):
    """A spot was added where the mover may not play."""


class UndoHistoryError(Jump61Error):
    """undo() was called with no recorded move to take back."""


class SearchError(Jump61Error):
    """The search was asked to move in a finished or blocked position."""
