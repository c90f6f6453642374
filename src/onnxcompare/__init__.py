__docformat__ = "restructuredtext"
__version__ = "2026.1.0"
__all__ = [
    "ComparisonResult",
    "DiffStatus",
    "OnnxCompare",
    "compare_onnx_models",
    "load_onnx_model",
    "render_text",
    "to_dict",
]

from onnxcompare._onnxcompare import OnnxCompare
from onnxcompare.compare import ComparisonResult, compare_onnx_models
from onnxcompare.match import DiffStatus
from onnxcompare.normalize import load_onnx_model
from onnxcompare.report import render_text, to_dict
