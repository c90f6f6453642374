"""Conversion of comparison results into JSON-ready structures."""

__docformat__ = "restructuredtext"
__all__ = ["to_dict"]

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from google.protobuf.message import Message
from onnx import TypeProto

from onnxcompare.match import DiffEntry
from onnxcompare.normalize import AttributeSpec

from ._lookup import format_attribute_value, format_type


def _convert(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    if isinstance(obj, AttributeSpec):
        return {"name": obj.name, "kind": obj.kind.name, "value": format_attribute_value(obj)}
    if isinstance(obj, DiffEntry):
        return {
            "status": obj.status.value,
            "model1": _convert(obj.model1),
            "model2": _convert(obj.model2),
            "changes": _convert(obj.changes),
        }
    if is_dataclass(obj):
        # Fields hidden from repr hold comparison keys, not display data
        return {f.name: _convert(getattr(obj, f.name)) for f in fields(obj) if f.repr}
    if isinstance(obj, dict):
        return {str(k): _convert(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_convert(v) for v in obj]
    if isinstance(obj, TypeProto):
        return format_type(obj)
    if isinstance(obj, Message):
        return type(obj).__name__
    return str(obj)


def to_dict(obj: Any) -> Any:
    """Convert a comparison result (or any part of it) to plain Python data.

    The output only contains dicts, lists, strings, numbers, booleans and
    None, so it can be passed to ``json.dumps``.

    :param obj: Comparison result or sub-tree
    :return: JSON-ready structure
    """
    return _convert(obj)
