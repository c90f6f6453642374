"""Value-level normalization helpers shared by every entity category."""

__docformat__ = "restructuredtext"
__all__ = [
    "ELEMENT_TYPE_NAMES",
    "MISSING_DISPLAY",
    "element_type_name",
    "get_message_field",
    "get_payload_length",
    "get_tensor_elem_type",
    "get_tensor_shape",
    "get_type_key",
    "normalize_dim",
    "normalize_int64",
    "serialize_message",
]

from collections.abc import Mapping
from typing import Any

import numpy as np
from google.protobuf.message import Message
from onnx import TensorProto, numpy_helper

from .types import Dim

MISSING_DISPLAY = "—"

ELEMENT_TYPE_NAMES: dict[int, str] = {
    1: "Float",
    2: "UInt8",
    3: "Int8",
    4: "UInt16",
    5: "Int16",
    6: "Int32",
    7: "Int64",
    8: "String",
    9: "Bool",
    10: "Float16",
    11: "Double",
    12: "UInt32",
    13: "UInt64",
    14: "Complex64",
    15: "Complex128",
    16: "BFloat16",
}

_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def get_message_field(message: Any, field_name: str) -> Any:
    """Get a sub-message field, or None when it is absent.

    Protobuf messages report unset singular fields through ``HasField``;
    other objects are read with ``getattr``.

    :param message: Protobuf message or duck-typed object (may be None)
    :param field_name: Field name
    :return: Field value or None
    """
    if message is None:
        return None
    if isinstance(message, Message):
        try:
            if not message.HasField(field_name):
                return None
        except ValueError:
            # Repeated fields and unknown names have no presence
            pass
    return getattr(message, field_name, None)


def _composite_words(value: Any) -> tuple[Any, Any, bool]:
    if isinstance(value, Mapping):
        return value.get("low"), value.get("high"), bool(value.get("unsigned", False))
    return (
        getattr(value, "low", None),
        getattr(value, "high", None),
        bool(getattr(value, "unsigned", False)),
    )


def normalize_int64(value: Any) -> Any:
    """Normalize a possibly 64-bit composite or string-encoded integer.

    Composite values carry two 32-bit words (``low``/``high``), as emitted by
    decoders without native 64-bit integers. They are combined with integer
    shifts so values above 2**53 stay exact.

    :param value: int, numpy integer, decimal string, composite or other
    :return: Exact int when the value can be resolved, else the value unchanged
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return value
    if value is None:
        return None

    low, high, unsigned = _composite_words(value)
    if low is None or high is None:
        return value
    combined = (int(high) << 32) | (int(low) & 0xFFFFFFFF)
    if unsigned:
        combined &= _UINT64_MASK
    return combined


def normalize_dim(dim: Any) -> Dim:
    """Normalize one shape dimension.

    :param dim: ``TensorShapeProto.Dimension`` or a raw value
    :return: int for numeric dims, str for symbolic dims, None when unknown
    """
    if dim is None:
        return None
    if isinstance(dim, Message):
        kind = dim.WhichOneof("value")
        if kind is None:
            return None
        return normalize_dim(getattr(dim, kind))
    if isinstance(dim, str):
        return dim

    if hasattr(dim, "dim_value") or hasattr(dim, "dim_param"):
        dim_param = getattr(dim, "dim_param", None)
        if dim_param:
            return str(dim_param)
        value = normalize_dim(getattr(dim, "dim_value", None))
        # Unset fields decode as 0; only an explicit oneof tag makes 0 numeric
        if value == 0 and getattr(dim, "value", None) not in ("dim_value", "dimValue"):
            return None
        return value

    value = normalize_int64(dim)
    return value if isinstance(value, int) else None


def _get_tensor_type(type_proto: Any) -> Any:
    tensor_type = get_message_field(type_proto, "tensor_type")
    if tensor_type is None:
        tensor_type = get_message_field(type_proto, "sparse_tensor_type")
    return tensor_type


def get_tensor_shape(type_proto: Any) -> tuple[Dim, ...]:
    """Extract normalized dims from a ``TypeProto``.

    :param type_proto: Declared type (may be None)
    :return: Dims tuple, empty when no shape is declared
    """
    shape = get_message_field(_get_tensor_type(type_proto), "shape")
    if shape is None:
        return ()
    dims = getattr(shape, "dim", None) or ()
    return tuple(normalize_dim(d) for d in dims)


def get_tensor_elem_type(type_proto: Any) -> int:
    """Extract the element type code from a ``TypeProto``.

    :param type_proto: Declared type (may be None)
    :return: Element type code, 0 when not declared
    """
    tensor_type = _get_tensor_type(type_proto)
    elem_type = normalize_int64(getattr(tensor_type, "elem_type", 0))
    return elem_type if isinstance(elem_type, int) else 0


def serialize_message(message: Any) -> bytes:
    """Serialize a value into comparable bytes.

    Protobuf messages use deterministic serialization; anything else falls
    back to its repr.

    :param message: Protobuf message or plain value
    :return: Byte string usable as an equality key
    """
    if isinstance(message, Message):
        return message.SerializeToString(deterministic=True)
    return repr(message).encode("utf-8")


def get_type_key(type_proto: Any, elem_type: int, shape: tuple[Dim, ...]) -> bytes:
    """Build the serialized type descriptor used for IO comparison.

    :param type_proto: Declared type (may be None)
    :param elem_type: Normalized element type code
    :param shape: Normalized dims
    :return: Deterministic descriptor bytes
    """
    if isinstance(type_proto, Message):
        return serialize_message(type_proto)
    return repr((elem_type, shape)).encode("utf-8")


def element_type_name(code: Any) -> str:
    """Map an ONNX element type code to its display name.

    Codes outside the known table pass through as their decimal string.

    :param code: Element type code
    :return: Type name, or MISSING_DISPLAY when no type is declared
    """
    code = normalize_int64(code)
    if not code:
        return MISSING_DISPLAY
    return ELEMENT_TYPE_NAMES.get(code, str(code))


def _external_length(tensor: TensorProto) -> int | None:
    entries = {entry.key: entry.value for entry in tensor.external_data}
    length = entries.get("length", "")
    return int(length) if length.isdigit() else None


def get_payload_length(tensor: Any) -> int | None:
    """Get the payload size of an initializer in bytes.

    Raw payloads are measured directly. Typed payloads are measured through
    their numpy form. External payloads use the recorded ``length`` entry.

    :param tensor: ``TensorProto`` or duck-typed object
    :return: Payload size in bytes, None if it cannot be determined
    """
    raw_data = getattr(tensor, "raw_data", None)
    if raw_data:
        return len(raw_data)
    if not isinstance(tensor, TensorProto):
        return None

    if tensor.data_location == TensorProto.EXTERNAL:
        return _external_length(tensor)
    if tensor.data_type == TensorProto.STRING:
        return sum(len(s) for s in tensor.string_data)
    if tensor.data_type == TensorProto.UNDEFINED:
        return None
    try:
        return int(numpy_helper.to_array(tensor).nbytes)
    except (ValueError, TypeError, KeyError):
        # Declared dims disagree with the stored data, or unknown data type
        return None
