"""ONNX model loading for comparison."""

__docformat__ = "restructuredtext"
__all__ = ["load_onnx_model"]

from pathlib import Path

import onnx
from google.protobuf.message import DecodeError
from onnx import ModelProto


def _check_model(model: ModelProto) -> None:
    """Check ONNX model validity using onnx.checker.

    :param model: Input ONNX model
    :raises ValueError: If model is invalid
    """
    try:
        onnx.checker.check_model(model)
    except (onnx.checker.ValidationError, ValueError, AttributeError, TypeError) as error:
        raise ValueError(f"Invalid ONNX model: {error}") from error


def load_onnx_model(
    onnx_path: str | Path,
    check_model: bool = False,
    load_external_data: bool = False,
) -> ModelProto:
    """Decode an ONNX file into a ``ModelProto``.

    External tensor data is not loaded by default; initializer payload sizes
    are then read from the external data records.

    :param onnx_path: Path to ONNX file
    :param check_model: Whether to validate the model with onnx.checker
    :param load_external_data: Whether to load external tensor data
    :return: Decoded model
    :raises FileNotFoundError: If the file does not exist
    :raises ValueError: If the file cannot be decoded or fails the check
    """
    path = Path(onnx_path)
    if not path.is_file():
        raise FileNotFoundError(f"ONNX model not found: {path}")

    try:
        model = onnx.load(str(path), load_external_data=load_external_data)
    except DecodeError as error:
        raise ValueError(f"Failed to decode ONNX model {path}: {error}") from error

    if check_model:
        _check_model(model)

    return model
