"""Attribute comparison for matched node pairs."""

__docformat__ = "restructuredtext"
__all__ = ["compare_attribute_pair", "compare_attributes"]

from collections.abc import Iterable

from onnxcompare.match import DiffEntry, match_entities
from onnxcompare.normalize import AttributeSpec

from .types import ValueDiff


def compare_attribute_pair(attr1: AttributeSpec, attr2: AttributeSpec) -> ValueDiff:
    """Compare two attributes of the same name.

    Kinds, declared values and any stray slot data all take part. Tensor and
    sub-graph values compare by their serialized form, so a change inside a
    nested graph only shows as this attribute differing.

    :param attr1: Attribute from the first node
    :param attr2: Attribute from the second node
    :return: Value detail
    """
    return ValueDiff(attr1.value, attr2.value, attr1 != attr2)


def compare_attributes(
    attrs1: Iterable[AttributeSpec] | None, attrs2: Iterable[AttributeSpec] | None
) -> dict[str, DiffEntry]:
    """Match two attribute sets by name.

    :param attrs1: Attributes of the first node
    :param attrs2: Attributes of the second node
    :return: Diff entry per attribute name, unchanged names included
    """
    return match_entities(
        attrs1 or (), attrs2 or (), compare_attribute_pair, category="attribute"
    )
