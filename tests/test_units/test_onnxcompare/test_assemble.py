"""Tests for Stage 3: Diff Assembly.

This module tests whole-model comparison:
- Reflexivity and symmetry of the result tree
- Model metadata and auxiliary metadata
- Degradation with error markers for missing graph parts

Test Coverage:
- TestProperties: 4 tests - Reflexivity, symmetry, input immutability
- TestModelInfo: 3 tests - Metadata fields and version normalization
- TestMetadata: 2 tests - Opset imports and metadata properties
- TestErrorMarkers: 4 tests - Missing graphs, collections and sparse entities
"""

from types import SimpleNamespace

import onnx.helper as onnx_helper
import pytest
from onnx import ModelProto, NodeProto

from onnxcompare.compare import compare_onnx_models
from onnxcompare.match import DiffStatus, DuplicateKeyWarning


def _all_entries(result):
    for _, category in result.graphs.categories():
        yield from category.entries.values()
        for entry in category.entries.values():
            attributes = getattr(entry.changes, "attributes", None)
            if attributes:
                yield from attributes.values()


def _statuses(category):
    return {key: entry.status for key, entry in category.entries.items()}


_MIRROR = {
    DiffStatus.ADDED: DiffStatus.REMOVED,
    DiffStatus.REMOVED: DiffStatus.ADDED,
    DiffStatus.MODIFIED: DiffStatus.MODIFIED,
    DiffStatus.UNCHANGED: DiffStatus.UNCHANGED,
}


class TestProperties:
    """Test structural properties of the comparison."""

    @pytest.mark.parametrize(
        "factory", ["create_conv_model", "create_add_model", "create_if_model", "create_attribute_model"]
    )
    def test_reflexivity(self, models, factory):
        """Comparing a model with a copy of itself finds no differences."""
        model = getattr(models, factory)()
        copy = ModelProto()
        copy.CopyFrom(model)
        result = compare_onnx_models(model, copy)
        assert all(entry.status is DiffStatus.UNCHANGED for entry in _all_entries(result))
        assert not result.model_info.is_different
        assert not result.has_differences

    def test_symmetry(self, models):
        """Swapping the models mirrors every classification."""
        model_a = models.create_conv_model(producer_version="1.0")
        model_b = models.create_conv_model(include_conv=False, producer_version="2.0")
        forward = compare_onnx_models(model_a, model_b)
        backward = compare_onnx_models(model_b, model_a)

        for (_, category), (_, mirrored) in zip(
            forward.graphs.categories(), backward.graphs.categories(), strict=True
        ):
            expected = {key: _MIRROR[status] for key, status in _statuses(category).items()}
            assert _statuses(mirrored) == expected

        assert forward.graphs.nodes.entries["Conv_0"].status is DiffStatus.REMOVED
        assert backward.graphs.nodes.entries["Conv_0"].status is DiffStatus.ADDED

        version = forward.model_info.producer_version
        swapped = backward.model_info.producer_version
        assert (version.model1, version.model2) == (swapped.model2, swapped.model1)

        inputs = forward.graphs.nodes.entries["Relu_0"].changes.inputs.details[0]
        swapped_inputs = backward.graphs.nodes.entries["Relu_0"].changes.inputs.details[0]
        assert (inputs.model1, inputs.model2) == (swapped_inputs.model2, swapped_inputs.model1)

    def test_inputs_are_not_mutated(self, models):
        model_a = models.create_conv_model()
        model_b = models.create_conv_model(group=2)
        before = (model_a.SerializeToString(), model_b.SerializeToString())
        compare_onnx_models(model_a, model_b)
        assert (model_a.SerializeToString(), model_b.SerializeToString()) == before

    def test_lookups_are_returned(self, models):
        result = compare_onnx_models(models.create_conv_model(), models.create_add_model())
        assert "conv_out" in result.lookups1.value_info
        assert "A" in result.lookups2.inputs


class TestModelInfo:
    """Test model metadata comparison."""

    def test_per_field_detail(self, models):
        result = compare_onnx_models(
            models.create_conv_model(producer_version="1.0"),
            models.create_conv_model(producer_version="1.1"),
        )
        info = result.model_info
        assert info.producer_version.is_different
        assert (info.producer_version.model1, info.producer_version.model2) == ("1.0", "1.1")
        assert not info.producer_name.is_different
        assert info.producer_name.model2 == "synthetic"
        assert not info.ir_version.is_different

    def test_string_and_composite_versions(self):
        model1 = SimpleNamespace(ir_version="8", model_version={"low": 5, "high": 0})
        model2 = SimpleNamespace(ir_version=8, model_version=5)
        info = compare_onnx_models(model1, model2).model_info
        assert not info.ir_version.is_different
        assert not info.model_version.is_different
        assert info.ir_version.model1 == 8

    def test_large_model_version(self):
        big = 2**53 + 1
        model1 = SimpleNamespace(model_version={"low": big & 0xFFFFFFFF, "high": big >> 32})
        model2 = SimpleNamespace(model_version=big - 1)
        info = compare_onnx_models(model1, model2).model_info
        assert info.model_version.is_different
        assert info.model_version.model1 == big


class TestMetadata:
    """Test auxiliary metadata comparison."""

    def test_opset_change(self, models):
        result = compare_onnx_models(
            models.create_conv_model(opset=17), models.create_conv_model(opset=18)
        )
        entry = result.metadata.opset_imports[""]
        assert entry.status is DiffStatus.MODIFIED
        assert (entry.changes.model1, entry.changes.model2) == (17, 18)
        assert result.has_differences

    def test_metadata_props(self, models):
        model1 = models.create_add_model()
        model2 = models.create_add_model()
        onnx_helper.set_model_props(model2, {"author": "someone"})
        props = compare_onnx_models(model1, model2).metadata.metadata_props
        assert props["author"].status is DiffStatus.ADDED


class TestErrorMarkers:
    """Test degradation on sparse input."""

    def test_missing_graph(self, models):
        result = compare_onnx_models(ModelProto(ir_version=7), models.create_add_model())
        assert result.graphs.error == "One or both models don't have a graph"
        assert result.graphs.categories() == []
        assert result.model_info.ir_version.is_different
        assert result.lookups1 is None
        assert result.lookups2 is not None

    def test_missing_node_collection(self):
        vi = onnx_helper.make_tensor_value_info("X", 1, [1])
        graph1 = SimpleNamespace(node=None, input=[vi], output=[], initializer=None)
        graph2 = SimpleNamespace(node=[], input=[vi], output=[], initializer=[])
        result = compare_onnx_models(
            SimpleNamespace(graph=graph1), SimpleNamespace(graph=graph2)
        )
        assert result.graphs.nodes.error == "One or both graphs don't have nodes"
        assert result.graphs.nodes.entries == {}
        assert result.graphs.initializers.error is not None
        assert result.graphs.inputs.error is None
        assert result.graphs.inputs.entries["X"].status is DiffStatus.UNCHANGED

    def test_sparse_nodes(self, models):
        model = models.create_add_model()
        model.graph.node.append(NodeProto())
        model.graph.node.append(NodeProto(op_type="Print", input=["C"]))
        other = ModelProto()
        other.CopyFrom(model)
        result = compare_onnx_models(model, other)
        assert set(result.graphs.nodes.entries) == {"Add_0", "<node:1>", "<Print:2>"}
        assert not result.has_differences

    def test_duplicate_node_names(self, models):
        model = models.create_add_model()
        model.graph.node.append(onnx_helper.make_node("Relu", ["C"], ["D"], name="Add_0"))
        with pytest.warns(DuplicateKeyWarning):
            result = compare_onnx_models(model, models.create_add_model())
        nodes = result.graphs.nodes
        assert nodes.model1_count == 2
        assert nodes.entries["Add_0"].status is DiffStatus.MODIFIED
        assert nodes.entries["Add_0"].model1.op_type == "Relu"
