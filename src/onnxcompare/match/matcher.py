"""Stage 2: Name-keyed entity matching.

One set-difference algorithm shared by nodes, inputs, outputs, initializers,
attributes and metadata entries.
"""

__docformat__ = "restructuredtext"
__all__ = ["DuplicateKeyWarning", "index_by_key", "match_entities"]

import warnings
from collections.abc import Callable, Iterable
from typing import Any

from .types import DiffEntry, DiffStatus


class DuplicateKeyWarning(UserWarning):
    """Several entities of one category share a matching key."""


def _name_key(entity: Any) -> str:
    return entity.name


def index_by_key(
    entities: Iterable[Any],
    key: Callable[[Any], str] = _name_key,
    category: str = "entity",
) -> dict[str, Any]:
    """Index entities by key; the last entity seen for a key wins.

    :param entities: Entities in source order
    :param key: Key derivation function
    :param category: Category name used in warnings
    :return: Mapping from key to entity
    """
    indexed: dict[str, Any] = {}
    for entity in entities:
        entity_key = key(entity)
        if entity_key in indexed:
            warnings.warn(
                f"Duplicate {category} key '{entity_key}': "
                f"only the last occurrence is compared.",
                DuplicateKeyWarning,
                stacklevel=3,
            )
        indexed[entity_key] = entity
    return indexed


def match_entities(
    entities1: Iterable[Any],
    entities2: Iterable[Any],
    compare: Callable[[Any, Any], Any],
    key: Callable[[Any], str] = _name_key,
    category: str = "entity",
) -> dict[str, DiffEntry]:
    """Match two entity collections by key and classify every key.

    Keys only in the first collection are removed, keys only in the second
    are added. Keys present on both sides are passed to ``compare``, whose
    result must expose ``is_different``.

    :param entities1: Entities of the first model
    :param entities2: Entities of the second model
    :param compare: Field comparator for matched pairs
    :param key: Key derivation function
    :param category: Category name used in warnings
    :return: Diff entries keyed by matching key
    """
    indexed1 = index_by_key(entities1, key, category)
    indexed2 = index_by_key(entities2, key, category)

    entries: dict[str, DiffEntry] = {}
    for entity_key in (*indexed1, *(k for k in indexed2 if k not in indexed1)):
        entity1 = indexed1.get(entity_key)
        entity2 = indexed2.get(entity_key)
        if entity_key not in indexed1:
            entries[entity_key] = DiffEntry(entity_key, DiffStatus.ADDED, model2=entity2)
        elif entity_key not in indexed2:
            entries[entity_key] = DiffEntry(entity_key, DiffStatus.REMOVED, model1=entity1)
        else:
            changes = compare(entity1, entity2)
            status = DiffStatus.MODIFIED if changes.is_different else DiffStatus.UNCHANGED
            entries[entity_key] = DiffEntry(entity_key, status, entity1, entity2, changes)
    return entries
