"""Tests for Stage 2: Entity Matching.

Test Coverage:
- TestMatchEntities: 4 tests - Classification of keys
- TestDuplicateKeys: 2 tests - Last-write-wins with warnings
"""

from types import SimpleNamespace

import pytest

from onnxcompare.compare import ValueDiff
from onnxcompare.match import DiffStatus, DuplicateKeyWarning, index_by_key, match_entities


def _entity(name, value=0):
    return SimpleNamespace(name=name, value=value)


def _compare(entity1, entity2):
    return ValueDiff(entity1.value, entity2.value, entity1.value != entity2.value)


class TestMatchEntities:
    """Test name-keyed matching."""

    def test_classifies_every_key(self):
        entries = match_entities(
            [_entity("a"), _entity("b", 1), _entity("c")],
            [_entity("b", 2), _entity("c"), _entity("d")],
            _compare,
        )
        assert entries["a"].status is DiffStatus.REMOVED
        assert entries["b"].status is DiffStatus.MODIFIED
        assert entries["c"].status is DiffStatus.UNCHANGED
        assert entries["d"].status is DiffStatus.ADDED

    def test_added_and_removed_details_are_entities(self):
        removed = _entity("a")
        added = _entity("d")
        entries = match_entities([removed], [added], _compare)
        assert entries["a"].details is removed
        assert entries["d"].details is added
        assert entries["a"].model2 is None
        assert entries["d"].model1 is None

    def test_matched_details_are_field_changes(self):
        entries = match_entities([_entity("b", 1)], [_entity("b", 2)], _compare)
        changes = entries["b"].details
        assert (changes.model1, changes.model2) == (1, 2)

    def test_custom_key(self):
        entries = match_entities(
            [("k", 1)], [("k", 1)], lambda a, b: ValueDiff(a, b, a != b), key=lambda i: i[0]
        )
        assert entries["k"].status is DiffStatus.UNCHANGED


class TestDuplicateKeys:
    """Test duplicate key handling."""

    def test_last_entity_wins(self):
        with pytest.warns(DuplicateKeyWarning):
            indexed = index_by_key([_entity("a", 1), _entity("a", 2)])
        assert indexed["a"].value == 2

    def test_duplicate_keys_in_matching(self):
        with pytest.warns(DuplicateKeyWarning, match="Duplicate node key 'a'"):
            entries = match_entities(
                [_entity("a", 1), _entity("a", 2)], [_entity("a", 2)], _compare, category="node"
            )
        assert entries["a"].status is DiffStatus.UNCHANGED
