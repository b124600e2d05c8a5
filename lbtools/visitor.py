"""Result codes of visit operations."""

import enum

__all__ = ["VisitorResult"]


class VisitorResult(enum.Enum):
    """The result code from any visit operation."""

    CONTINUE = 0
    """Continue the traversal."""
    TERMINATE = 1
    """Abort the traversal."""
    PRUNE = 2
    """Do not traverse the current entity downwards."""

    def __str__(self) -> str:
        return self.name.lower()