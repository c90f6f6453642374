"""Stage 4: Report Rendering.

Presentation helpers consuming the comparison result and the name maps.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "UNKNOWN_DIM_DISPLAY",
    "format_attribute_value",
    "format_shape",
    "format_type",
    "get_shape_string",
    "render_text",
    "split_node_inputs",
    "to_dict",
]

from onnxcompare.report._lookup import (
    UNKNOWN_DIM_DISPLAY,
    format_attribute_value,
    format_shape,
    format_type,
    get_shape_string,
    split_node_inputs,
)
from onnxcompare.report._serialize import to_dict
from onnxcompare.report._text import render_text
