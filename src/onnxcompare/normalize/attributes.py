"""ONNX node attribute normalization.

Attributes become tagged values whose kind comes from the declared
``AttributeProto.type`` discriminator rather than from whichever value slot
happens to be populated.
"""

__docformat__ = "restructuredtext"
__all__ = ["AttributeSlotWarning", "normalize_attribute", "normalize_attributes"]

import warnings
from collections.abc import Callable, Iterable
from typing import Any

import numpy as np
from google.protobuf.message import Message

from .types import AttributeKind, AttributeSpec
from .utils import normalize_int64, serialize_message


class AttributeSlotWarning(UserWarning):
    """Attribute value slots disagree with the declared attribute type."""


def _decode(value: Any) -> str:
    if isinstance(value, str):
        return value
    return bytes(value).decode("utf-8", errors="replace")


def _floats_key(values: Any) -> bytes:
    # Bit patterns keep NaN equal to itself; -0.0 is folded into 0.0
    array = np.asarray(tuple(values), dtype=np.float32)
    array[array == 0] = 0.0
    return array.tobytes()


def _float_key(value: Any) -> bytes:
    return _floats_key((value,))


def _messages_key(values: Any) -> tuple[bytes, ...]:
    return tuple(serialize_message(v) for v in values)


def _to_bytes(value: Any) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


# kind -> (value slot, value extractor, key extractor)
EXTRACT_ATTR_MAP: dict[AttributeKind, tuple[str | None, Callable, Callable]] = {
    AttributeKind.UNSET: (None, lambda x: None, lambda x: None),
    AttributeKind.FLOAT: ("f", float, _float_key),
    AttributeKind.INT: ("i", normalize_int64, normalize_int64),
    AttributeKind.STRING: ("s", _decode, _to_bytes),
    AttributeKind.TENSOR: ("t", lambda x: x, serialize_message),
    AttributeKind.GRAPH: ("g", lambda x: x, serialize_message),
    AttributeKind.FLOAT_LIST: ("floats", lambda x: tuple(float(v) for v in x), _floats_key),
    AttributeKind.INT_LIST: (
        "ints",
        lambda x: tuple(normalize_int64(v) for v in x),
        lambda x: tuple(normalize_int64(v) for v in x),
    ),
    AttributeKind.STRING_LIST: (
        "strings",
        lambda x: tuple(_decode(v) for v in x),
        lambda x: tuple(_to_bytes(v) for v in x),
    ),
    AttributeKind.TENSOR_LIST: ("tensors", tuple, _messages_key),
    AttributeKind.GRAPH_LIST: ("graphs", tuple, _messages_key),
    AttributeKind.SPARSE_TENSOR: ("sparse_tensor", lambda x: x, serialize_message),
    AttributeKind.SPARSE_TENSOR_LIST: ("sparse_tensors", tuple, _messages_key),
    AttributeKind.TYPE_PROTO: ("tp", lambda x: x, serialize_message),
    AttributeKind.TYPE_PROTO_LIST: ("type_protos", tuple, _messages_key),
}

_SLOT_TO_KIND = {slot: kind for kind, (slot, _, _) in EXTRACT_ATTR_MAP.items() if slot}


def _populated_slots(attr: Any) -> list[str]:
    """List value slots carrying data, in schema order.

    :param attr: ``AttributeProto`` or duck-typed object
    :return: Populated slot names
    """
    if isinstance(attr, Message):
        return [fd.name for fd, _ in attr.ListFields() if fd.name in _SLOT_TO_KIND]
    populated = []
    for slot in _SLOT_TO_KIND:
        value = getattr(attr, slot, None)
        if value is None:
            continue
        if isinstance(value, Message) or value:
            populated.append(slot)
    return populated


def _slot_fingerprint(value: Any) -> bytes:
    if isinstance(value, Message):
        return serialize_message(value)
    if isinstance(value, (str, bytes, int, float)):
        return repr(value).encode("utf-8")
    return repr(
        tuple(serialize_message(v) if isinstance(v, Message) else v for v in value)
    ).encode("utf-8")


def _declared_kind(attr: Any, populated: list[str]) -> AttributeKind:
    name = getattr(attr, "name", "") or ""
    code = normalize_int64(getattr(attr, "type", 0) or 0)
    try:
        kind = AttributeKind(code)
    except ValueError:
        warnings.warn(
            f"Attribute '{name}' declares unknown type {code}; treating it as unset.",
            AttributeSlotWarning,
            stacklevel=3,
        )
        return AttributeKind.UNSET

    if kind is AttributeKind.UNSET and populated:
        # Legacy exporters leave the type field empty
        inferred = _SLOT_TO_KIND[populated[0]]
        warnings.warn(
            f"Attribute '{name}' declares no type; inferred {inferred.name} "
            f"from its '{populated[0]}' slot.",
            AttributeSlotWarning,
            stacklevel=3,
        )
        return inferred
    return kind


def normalize_attribute(attr: Any) -> AttributeSpec:
    """Normalize one attribute into a tagged value.

    Slots populated besides the declared one are kept as fingerprints so
    that they still take part in equality.

    :param attr: ``AttributeProto`` or duck-typed object
    :return: Normalized attribute
    """
    name = getattr(attr, "name", "") or ""
    populated = _populated_slots(attr)
    kind = _declared_kind(attr, populated)
    slot, extract_value, extract_key = EXTRACT_ATTR_MAP[kind]

    if slot is None:
        value = key = None
    else:
        raw = getattr(attr, slot, None)
        if raw is None:
            value = key = None
        else:
            value = extract_value(raw)
            key = extract_key(raw)

    stray = [s for s in populated if s != slot]
    if stray:
        warnings.warn(
            f"Attribute '{name}' of type {kind.name} also populates {', '.join(stray)}.",
            AttributeSlotWarning,
            stacklevel=2,
        )
    stray_slots = tuple((s, _slot_fingerprint(getattr(attr, s))) for s in stray)

    return AttributeSpec(name=name, kind=kind, value=value, key=key, stray_slots=stray_slots)


def normalize_attributes(attrs: Iterable[Any] | None) -> tuple[AttributeSpec, ...]:
    """Normalize all attributes of a node, keeping declaration order.

    :param attrs: Node attributes (may be None)
    :return: Normalized attributes
    """
    return tuple(normalize_attribute(attr) for attr in attrs or ())
