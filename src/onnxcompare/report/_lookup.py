"""Name-based lookups used when presenting node differences."""

__docformat__ = "restructuredtext"
__all__ = [
    "UNKNOWN_DIM_DISPLAY",
    "format_attribute_value",
    "format_shape",
    "format_type",
    "get_shape_string",
    "split_node_inputs",
]

from collections.abc import Sequence
from typing import Any

from google.protobuf.message import Message

from onnxcompare.normalize import (
    MISSING_DISPLAY,
    AttributeKind,
    AttributeSpec,
    NameMaps,
    element_type_name,
)
from onnxcompare.normalize.utils import get_message_field, get_tensor_elem_type, get_tensor_shape

UNKNOWN_DIM_DISPLAY = "?"


def format_shape(dims: Sequence[Any] | None) -> str:
    """Format dims as ``[1, 3, batch, ?]``.

    :param dims: Dims (int, str or None each), None if no shape is known
    :return: Shape string, MISSING_DISPLAY when dims is None
    """
    if dims is None:
        return MISSING_DISPLAY
    parts = [UNKNOWN_DIM_DISPLAY if d is None else str(d) for d in dims]
    return f"[{', '.join(parts)}]"


def format_type(type_proto: Any) -> str:
    """Format a declared type as ``tensor(Float)[1, 3]``, ``seq(...)`` and so on.

    :param type_proto: ``TypeProto`` or duck-typed object (may be None)
    :return: Type string, MISSING_DISPLAY when no type is declared
    """
    if type_proto is None:
        return MISSING_DISPLAY
    # Duck-typed types only carry tensor fields
    kind = type_proto.WhichOneof("value") if isinstance(type_proto, Message) else "tensor_type"

    if kind in ("tensor_type", "sparse_tensor_type"):
        prefix = "tensor" if kind == "tensor_type" else "sparse_tensor"
        text = f"{prefix}({element_type_name(get_tensor_elem_type(type_proto))})"
        shape = get_tensor_shape(type_proto)
        if shape:
            text += format_shape(shape)
    elif kind == "sequence_type":
        text = f"seq({format_type(get_message_field(type_proto.sequence_type, 'elem_type'))})"
    elif kind == "optional_type":
        text = f"optional({format_type(get_message_field(type_proto.optional_type, 'elem_type'))})"
    elif kind == "map_type":
        key_type = element_type_name(type_proto.map_type.key_type)
        value_type = format_type(get_message_field(type_proto.map_type, "value_type"))
        text = f"map({key_type}, {value_type})"
    else:
        text = MISSING_DISPLAY

    denotation = getattr(type_proto, "denotation", "")
    if denotation:
        text += f" '{denotation}'"
    return text


def _find_shape(name: str, maps: NameMaps) -> Sequence[Any] | None:
    for category in (maps.inputs, maps.outputs, maps.value_info):
        if name in category:
            return category[name].shape
    if name in maps.initializers:
        return maps.initializers[name].dims
    return None


def get_shape_string(name: str | None, maps: NameMaps | None) -> str:
    """Resolve the shape of a tensor referenced by name.

    Graph inputs are searched first, then outputs, value annotations and
    initializers.

    :param name: Tensor name
    :param maps: Name maps of the model the name belongs to
    :return: Shape string, MISSING_DISPLAY when the name is unknown
    """
    if not name or maps is None:
        return MISSING_DISPLAY
    return format_shape(_find_shape(name, maps))


def split_node_inputs(
    inputs: Sequence[str], maps: NameMaps | None
) -> tuple[list[str], list[str]]:
    """Split node inputs into data inputs and initializer-backed parameters.

    :param inputs: Node input names
    :param maps: Name maps of the node's model
    :return: (data inputs, parameter inputs), both in source order
    """
    initializers = maps.initializers if maps is not None else {}
    data_inputs = [name for name in inputs if name not in initializers]
    param_inputs = [name for name in inputs if name in initializers]
    return data_inputs, param_inputs


def _format_opaque(value: Any, kind: AttributeKind) -> str:
    if isinstance(value, Message) and kind is AttributeKind.TENSOR:
        return f"<tensor {format_shape(tuple(value.dims))}>"
    if isinstance(value, Message) and kind is AttributeKind.GRAPH:
        return f"<graph {value.name or MISSING_DISPLAY}: {len(value.node)} nodes>"
    return f"<{kind.name.lower()}>"


def format_attribute_value(attr: AttributeSpec | None) -> str:
    """Format an attribute value for display.

    :param attr: Normalized attribute (None when absent)
    :return: Display string
    """
    if attr is None or attr.value is None:
        return "N/A"
    kind = attr.kind
    if kind in (AttributeKind.FLOAT_LIST, AttributeKind.INT_LIST):
        return f"[{', '.join(str(v) for v in attr.value)}]"
    if kind is AttributeKind.STRING_LIST:
        return f"[{', '.join(repr(v) for v in attr.value)}]"
    if kind is AttributeKind.STRING:
        return repr(attr.value)
    if kind in (AttributeKind.FLOAT, AttributeKind.INT):
        return str(attr.value)
    if isinstance(attr.value, tuple):
        return f"[{', '.join(_format_opaque(v, kind) for v in attr.value)}]"
    return _format_opaque(attr.value, kind)
