"""Shared pytest fixtures for onnxcompare unit tests."""

import onnx
import pytest

from tests.test_units.test_onnxcompare.fixtures.synthetic_models import SyntheticONNXModels


@pytest.fixture
def models():
    """Factory for synthetic models."""
    return SyntheticONNXModels


@pytest.fixture
def conv_model():
    """Baseline convolution model."""
    return SyntheticONNXModels.create_conv_model()


@pytest.fixture
def conv_model_path(tmp_path):
    """Create and save the baseline convolution model."""
    path = tmp_path / "conv_a.onnx"
    onnx.save(SyntheticONNXModels.create_conv_model(), str(path))
    return str(path)


@pytest.fixture
def conv_model_double_path(tmp_path):
    """Create and save the convolution model with a Double input."""
    path = tmp_path / "conv_b.onnx"
    model = SyntheticONNXModels.create_conv_model(input_type=onnx.TensorProto.DOUBLE)
    onnx.save(model, str(path))
    return str(path)
