"""Pytest configuration and shared fixtures for onnxcompare tests."""

import onnx
import onnx.helper as onnx_helper
import pytest


@pytest.fixture
def identity_model(tmp_path):
    """Create and save Identity ONNX model."""
    X = onnx_helper.make_tensor_value_info("X", onnx.TensorProto.FLOAT, (1, 3))  # noqa: N806
    Y = onnx_helper.make_tensor_value_info("Y", onnx.TensorProto.FLOAT, (1, 3))  # noqa: N806
    node = onnx_helper.make_node("Identity", inputs=["X"], outputs=["Y"], name="Identity_0")
    graph = onnx_helper.make_graph([node], "IdentityModel", [X], [Y])
    model = onnx_helper.make_model(graph, opset_imports=[onnx_helper.make_opsetid("", 20)])
    model.ir_version = 8

    path = tmp_path / "identity.onnx"
    onnx.save(model, str(path))
    return str(path)
