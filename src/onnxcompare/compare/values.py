"""Graph input and output comparison."""

__docformat__ = "restructuredtext"
__all__ = ["compare_io_pair", "compare_ios"]

from collections.abc import Sequence

from onnxcompare.match import match_entities
from onnxcompare.normalize import TensorSpec

from .types import CategoryDiff, FieldDiff, IODiff


def compare_io_pair(spec1: TensorSpec, spec2: TensorSpec) -> IODiff:
    """Compare two graph values of the same name.

    :param spec1: Value from the first model
    :param spec2: Value from the second model
    :return: Type and shape detail
    """
    type_different = spec1.type_key != spec2.type_key
    return IODiff(
        element_type=FieldDiff.of(spec1.type_name, spec2.type_name),
        shape=FieldDiff.of(spec1.shape, spec2.shape),
        declared_type=FieldDiff(spec1.type_proto, spec2.type_proto, type_different),
        is_different=type_different,
    )


def compare_ios(
    ios1: Sequence[TensorSpec] | None,
    ios2: Sequence[TensorSpec] | None,
    category: str = "input",
) -> CategoryDiff:
    """Compare graph inputs or graph outputs.

    :param ios1: Values of the first graph, None if missing
    :param ios2: Values of the second graph, None if missing
    :param category: "input" or "output"
    :return: Category diff
    """
    if ios1 is None or ios2 is None:
        return CategoryDiff.missing(f"One or both graphs don't have {category}s")
    entries = match_entities(ios1, ios2, compare_io_pair, category=category)
    return CategoryDiff(len(ios1), len(ios2), entries)
