"""Stage 1: Normalized Entity Type Definitions.

Defines the canonical, immutable specs every comparison works on.
Specs are built once per model by the normalizer and never mutated.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "AttributeKind",
    "AttributeSpec",
    "Dim",
    "InitializerSpec",
    "ModelInfo",
    "NameMaps",
    "NodeSpec",
    "NormalizedGraph",
    "NormalizedModel",
    "TensorSpec",
]

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# int: numeric dim, str: symbolic dim, None: unknown dim
Dim = int | str | None


class AttributeKind(Enum):
    """Attribute value kinds, numbered like ``AttributeProto.AttributeType``."""

    UNSET = 0
    FLOAT = 1
    INT = 2
    STRING = 3
    TENSOR = 4
    GRAPH = 5
    FLOAT_LIST = 6
    INT_LIST = 7
    STRING_LIST = 8
    TENSOR_LIST = 9
    GRAPH_LIST = 10
    SPARSE_TENSOR = 11
    SPARSE_TENSOR_LIST = 12
    TYPE_PROTO = 13
    TYPE_PROTO_LIST = 14


@dataclass(frozen=True)
class TensorSpec:
    """Declared type and shape of a graph input, output or value annotation.

    :param name: Tensor name (identity key within its category)
    :param shape: Ordered dimensions, empty when no shape is declared
    :param elem_type: ONNX element type code (0 when not declared)
    :param type_name: Display name of the element type
    :param type_key: Deterministic serialization of the declared type
    :param type_proto: Declared ``TypeProto`` (None when not declared)
    """

    name: str
    shape: tuple[Dim, ...]
    elem_type: int
    type_name: str
    type_key: bytes = field(default=b"", repr=False)
    type_proto: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class InitializerSpec:
    """Constant tensor summary used for weight comparison.

    :param name: Initializer name
    :param dims: Ordered integer dimensions
    :param data_type: ONNX element type code
    :param type_name: Display name of the element type
    :param payload_length: Payload size in bytes, None if it cannot be determined
    """

    name: str
    dims: tuple[int, ...]
    data_type: int
    type_name: str
    payload_length: int | None


@dataclass(frozen=True)
class AttributeSpec:
    """Tagged attribute value.

    Equality uses ``kind``, ``key`` and ``stray_slots`` only; ``value`` is
    kept for display.

    :param name: Attribute name
    :param kind: Value kind taken from the declared type
    :param value: Python value of the declared slot
    :param key: Comparable form of ``value``
    :param stray_slots: Populated value slots other than the declared one
    """

    name: str
    kind: AttributeKind
    value: Any = field(compare=False)
    key: Any = field(repr=False)
    stray_slots: tuple[tuple[str, bytes], ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class NodeSpec:
    """Operator instance with its identity key resolved.

    :param key: Matching key (name, first output name, or synthesized)
    :param name: Explicit node name ("" if absent)
    :param op_type: Operator kind
    :param domain: Operator domain
    :param inputs: Ordered input tensor names
    :param outputs: Ordered output tensor names
    :param attributes: Attributes in declaration order
    """

    key: str
    name: str
    op_type: str
    domain: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    attributes: tuple[AttributeSpec, ...]


@dataclass(frozen=True)
class NameMaps:
    """Name to spec lookups for one model, one mapping per category.

    :param inputs: Graph inputs by name
    :param outputs: Graph outputs by name
    :param initializers: Initializers by name
    :param value_info: Intermediate value annotations by name
    """

    inputs: dict[str, TensorSpec]
    outputs: dict[str, TensorSpec]
    initializers: dict[str, InitializerSpec]
    value_info: dict[str, TensorSpec]


@dataclass(frozen=True)
class NormalizedGraph:
    """Normalized graph collections.

    A collection is None when the decoded graph does not carry it at all,
    which the comparators report as a category-level error marker.
    """

    nodes: tuple[NodeSpec, ...] | None
    inputs: tuple[TensorSpec, ...] | None
    outputs: tuple[TensorSpec, ...] | None
    initializers: tuple[InitializerSpec, ...] | None
    value_info: tuple[TensorSpec, ...] | None
    maps: NameMaps


@dataclass(frozen=True)
class ModelInfo:
    """Model-level metadata with version fields normalized to exact integers."""

    ir_version: Any
    producer_name: str
    producer_version: str
    domain: str
    model_version: Any
    opset_imports: dict[str, Any]
    metadata_props: dict[str, str]


@dataclass(frozen=True)
class NormalizedModel:
    """Normalization result for one model.

    :param info: Model metadata
    :param graph: Normalized graph, None when the model has no graph
    """

    info: ModelInfo
    graph: NormalizedGraph | None
