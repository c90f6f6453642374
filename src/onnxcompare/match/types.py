"""Stage 2: Match result types."""

__docformat__ = "restructuredtext"
__all__ = ["DiffEntry", "DiffStatus"]

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DiffStatus(Enum):
    """Classification of one matched key."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffEntry:
    """Comparison outcome for one key of one entity category.

    :param key: Matching key
    :param status: Classification
    :param model1: Entity from the first model (None when added)
    :param model2: Entity from the second model (None when removed)
    :param changes: Field-level detail for keys present on both sides
    """

    key: str
    status: DiffStatus
    model1: Any = None
    model2: Any = None
    changes: Any = None

    @property
    def is_different(self) -> bool:
        return self.status is not DiffStatus.UNCHANGED

    @property
    def details(self) -> Any:
        """The entity for added/removed keys, the field detail otherwise."""
        if self.status is DiffStatus.ADDED:
            return self.model2
        if self.status is DiffStatus.REMOVED:
            return self.model1
        return self.changes
