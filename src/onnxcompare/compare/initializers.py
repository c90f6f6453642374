"""Initializer comparison."""

__docformat__ = "restructuredtext"
__all__ = ["compare_initializer_pair", "compare_initializers"]

from collections.abc import Sequence

from onnxcompare.match import match_entities
from onnxcompare.normalize import InitializerSpec

from .types import CategoryDiff, FieldDiff, InitializerDiff

MISSING_INITIALIZERS = "One or both graphs don't have initializers"


def compare_initializer_pair(init1: InitializerSpec, init2: InitializerSpec) -> InitializerDiff:
    """Compare two initializers of the same name.

    Content is approximated by payload length; it is only reported as
    different when both lengths are known.

    :param init1: Initializer from the first model
    :param init2: Initializer from the second model
    :return: Initializer detail
    """
    length1 = init1.payload_length
    length2 = init2.payload_length
    return InitializerDiff(
        data_type=FieldDiff.of(init1.type_name, init2.type_name),
        dims=FieldDiff.of(init1.dims, init2.dims),
        content_different=length1 is not None and length2 is not None and length1 != length2,
    )


def compare_initializers(
    inits1: Sequence[InitializerSpec] | None, inits2: Sequence[InitializerSpec] | None
) -> CategoryDiff:
    """Compare the initializers of two graphs.

    :param inits1: Initializers of the first graph, None if missing
    :param inits2: Initializers of the second graph, None if missing
    :return: Initializer category diff
    """
    if inits1 is None or inits2 is None:
        return CategoryDiff.missing(MISSING_INITIALIZERS)
    entries = match_entities(inits1, inits2, compare_initializer_pair, category="initializer")
    return CategoryDiff(len(inits1), len(inits2), entries)
