"""Stage 1: ONNX Model Normalization.

This module converts decoded ONNX models into canonical comparable specs.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "ELEMENT_TYPE_NAMES",
    "MISSING_DISPLAY",
    "AttributeKind",
    "AttributeSlotWarning",
    "AttributeSpec",
    "Dim",
    "InitializerSpec",
    "ModelInfo",
    "NameMaps",
    "NodeSpec",
    "NormalizedGraph",
    "NormalizedModel",
    "TensorSpec",
    "element_type_name",
    "get_node_key",
    "get_payload_length",
    "load_onnx_model",
    "normalize_attribute",
    "normalize_attributes",
    "normalize_dim",
    "normalize_graph",
    "normalize_initializers",
    "normalize_int64",
    "normalize_model",
    "normalize_model_info",
    "normalize_nodes",
    "normalize_value_infos",
]

from onnxcompare.normalize.attributes import (
    AttributeSlotWarning,
    normalize_attribute,
    normalize_attributes,
)
from onnxcompare.normalize.load import load_onnx_model
from onnxcompare.normalize.normalize import (
    get_node_key,
    normalize_graph,
    normalize_initializers,
    normalize_model,
    normalize_model_info,
    normalize_nodes,
    normalize_value_infos,
)
from onnxcompare.normalize.types import (
    AttributeKind,
    AttributeSpec,
    Dim,
    InitializerSpec,
    ModelInfo,
    NameMaps,
    NodeSpec,
    NormalizedGraph,
    NormalizedModel,
    TensorSpec,
)
from onnxcompare.normalize.utils import (
    ELEMENT_TYPE_NAMES,
    MISSING_DISPLAY,
    element_type_name,
    get_payload_length,
    normalize_dim,
    normalize_int64,
)
