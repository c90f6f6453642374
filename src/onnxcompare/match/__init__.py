"""Stage 2: Entity Matching.

This module matches named entities of two models and classifies each key.
"""

__docformat__ = "restructuredtext"
__all__ = ["DiffEntry", "DiffStatus", "DuplicateKeyWarning", "index_by_key", "match_entities"]

from onnxcompare.match.matcher import DuplicateKeyWarning, index_by_key, match_entities
from onnxcompare.match.types import DiffEntry, DiffStatus
