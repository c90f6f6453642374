"""Model metadata comparison."""

__docformat__ = "restructuredtext"
__all__ = ["compare_metadata", "compare_model_info"]

from collections.abc import Mapping
from typing import Any

from onnxcompare.match import DiffEntry, match_entities
from onnxcompare.normalize import ModelInfo

from .types import FieldDiff, MetadataDiff, ModelInfoDiff, ValueDiff


def compare_model_info(info1: ModelInfo, info2: ModelInfo) -> ModelInfoDiff:
    """Compare model-level fields one by one.

    Version fields are already normalized to exact integers, so a string
    encoded version equals its integer form.

    :param info1: Metadata of the first model
    :param info2: Metadata of the second model
    :return: Per-field detail
    """
    return ModelInfoDiff(
        ir_version=FieldDiff.of(info1.ir_version, info2.ir_version),
        producer_name=FieldDiff.of(info1.producer_name, info2.producer_name),
        producer_version=FieldDiff.of(info1.producer_version, info2.producer_version),
        domain=FieldDiff.of(info1.domain, info2.domain),
        model_version=FieldDiff.of(info1.model_version, info2.model_version),
    )


def _compare_items(item1: tuple[str, Any], item2: tuple[str, Any]) -> ValueDiff:
    return ValueDiff(item1[1], item2[1], item1[1] != item2[1])


def _match_mapping(
    mapping1: Mapping[str, Any], mapping2: Mapping[str, Any], category: str
) -> dict[str, DiffEntry]:
    return match_entities(
        mapping1.items(),
        mapping2.items(),
        _compare_items,
        key=lambda item: item[0],
        category=category,
    )


def compare_metadata(info1: ModelInfo, info2: ModelInfo) -> MetadataDiff:
    """Compare opset imports and metadata properties.

    :param info1: Metadata of the first model
    :param info2: Metadata of the second model
    :return: Metadata detail
    """
    return MetadataDiff(
        opset_imports=_match_mapping(info1.opset_imports, info2.opset_imports, "opset"),
        metadata_props=_match_mapping(
            info1.metadata_props, info2.metadata_props, "metadata property"
        ),
    )
