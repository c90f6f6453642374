"""Stage 3: Structural Comparison.

This module compares normalized models and assembles the result tree.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "CategoryDiff",
    "ComparisonResult",
    "FieldDiff",
    "GraphDiff",
    "IODiff",
    "IndexDiff",
    "InitializerDiff",
    "MetadataDiff",
    "ModelInfoDiff",
    "NodeDiff",
    "SequenceDiff",
    "ValueDiff",
    "compare_attribute_pair",
    "compare_attributes",
    "compare_graphs",
    "compare_initializer_pair",
    "compare_initializers",
    "compare_io_pair",
    "compare_ios",
    "compare_metadata",
    "compare_model_info",
    "compare_node_pair",
    "compare_nodes",
    "compare_normalized_models",
    "compare_onnx_models",
    "compare_sequences",
]

from onnxcompare.compare.assemble import (
    compare_graphs,
    compare_normalized_models,
    compare_onnx_models,
)
from onnxcompare.compare.attributes import compare_attribute_pair, compare_attributes
from onnxcompare.compare.initializers import compare_initializer_pair, compare_initializers
from onnxcompare.compare.model_info import compare_metadata, compare_model_info
from onnxcompare.compare.nodes import compare_node_pair, compare_nodes, compare_sequences
from onnxcompare.compare.types import (
    CategoryDiff,
    ComparisonResult,
    FieldDiff,
    GraphDiff,
    IndexDiff,
    InitializerDiff,
    IODiff,
    MetadataDiff,
    ModelInfoDiff,
    NodeDiff,
    SequenceDiff,
    ValueDiff,
)
from onnxcompare.compare.values import compare_io_pair, compare_ios
