"""Synthetic ONNX models for comparison tests.

Every factory builds a fresh ModelProto; keyword arguments select the single
change a test needs between two otherwise identical models.
"""

import onnx.helper as onnx_helper
from onnx import ModelProto, NodeProto, TensorProto


class SyntheticONNXModels:
    """Factory for small ONNX models."""

    @staticmethod
    def make_model(
        nodes: list[NodeProto],
        inputs: list,
        outputs: list,
        initializers: tuple = (),
        value_info: tuple = (),
        opset: int = 17,
        **model_fields,
    ) -> ModelProto:
        """Assemble a model from graph parts and set top-level fields."""
        graph = onnx_helper.make_graph(
            nodes,
            "test_graph",
            inputs,
            outputs,
            initializer=list(initializers),
            value_info=list(value_info),
        )
        model = onnx_helper.make_model(graph, opset_imports=[onnx_helper.make_opsetid("", opset)])
        model.ir_version = 8
        for field_name, value in model_fields.items():
            setattr(model, field_name, value)
        return model

    @staticmethod
    def create_weight(name: str, dims: list[int], payload_length: int) -> TensorProto:
        """Create a FLOAT initializer with a raw payload of the given size."""
        tensor = TensorProto()
        tensor.name = name
        tensor.data_type = TensorProto.FLOAT
        tensor.dims.extend(dims)
        tensor.raw_data = bytes(payload_length)
        return tensor

    @staticmethod
    def create_conv_model(
        input_type: int = TensorProto.FLOAT,
        group: int = 1,
        weight_payload: int = 2304,
        conv_name: str = "Conv_0",
        include_conv: bool = True,
        relu_op: str = "Relu",
        opset: int = 17,
        producer_version: str = "1.0",
    ) -> ModelProto:
        """Create X -> Conv_0 -> Relu_0 -> Y with weights W1 and B1."""
        x = onnx_helper.make_tensor_value_info("X", input_type, [1, 3, 224, 224])
        y = onnx_helper.make_tensor_value_info("Y", TensorProto.FLOAT, ["N", 64, 224, 224])
        conv_out = onnx_helper.make_tensor_value_info(
            "conv_out", TensorProto.FLOAT, [1, 64, 224, 224]
        )
        w1 = SyntheticONNXModels.create_weight("W1", [64, 3, 3, 3], weight_payload)
        b1 = onnx_helper.make_tensor("B1", TensorProto.FLOAT, [64], [0.5] * 64)

        nodes = []
        if include_conv:
            nodes.append(
                onnx_helper.make_node(
                    "Conv",
                    ["X", "W1", "B1"],
                    ["conv_out"],
                    name=conv_name,
                    group=group,
                    kernel_shape=[3, 3],
                    pads=[1, 1, 1, 1],
                    strides=[1, 1],
                )
            )
        relu_input = "conv_out" if include_conv else "X"
        nodes.append(onnx_helper.make_node(relu_op, [relu_input], ["Y"], name="Relu_0"))

        return SyntheticONNXModels.make_model(
            nodes,
            [x],
            [y],
            initializers=(w1, b1),
            value_info=(conv_out,),
            opset=opset,
            producer_name="synthetic",
            producer_version=producer_version,
        )

    @staticmethod
    def create_add_model(
        order: tuple[str, str] = ("A", "B"), node_name: str | None = "Add_0"
    ) -> ModelProto:
        """Create C = Add(A, B) with the argument order given."""
        a = onnx_helper.make_tensor_value_info("A", TensorProto.FLOAT, [2, 2])
        b = onnx_helper.make_tensor_value_info("B", TensorProto.FLOAT, [2, 2])
        c = onnx_helper.make_tensor_value_info("C", TensorProto.FLOAT, [2, 2])
        node = onnx_helper.make_node("Add", list(order), ["C"], name=node_name)
        return SyntheticONNXModels.make_model([node], [a, b], [c])

    @staticmethod
    def create_if_model(then_value: float = 1.0, else_value: float = 0.0) -> ModelProto:
        """Create an If node whose branches each output one constant."""

        def _branch(graph_name: str, value: float):
            constant = onnx_helper.make_node(
                "Constant",
                [],
                [f"{graph_name}_out"],
                value=onnx_helper.make_tensor("c", TensorProto.FLOAT, [1], [value]),
            )
            out = onnx_helper.make_tensor_value_info(f"{graph_name}_out", TensorProto.FLOAT, [1])
            return onnx_helper.make_graph([constant], graph_name, [], [out])

        cond = onnx_helper.make_tensor_value_info("cond", TensorProto.BOOL, [])
        y = onnx_helper.make_tensor_value_info("Y", TensorProto.FLOAT, [1])
        node = onnx_helper.make_node(
            "If",
            ["cond"],
            ["Y"],
            name="If_0",
            then_branch=_branch("then", then_value),
            else_branch=_branch("else", else_value),
        )
        return SyntheticONNXModels.make_model([node], [cond], [y])

    @staticmethod
    def create_attribute_model(alpha: float = float("nan"), mode: str = "constant") -> ModelProto:
        """Create nodes carrying float, string, list and tensor attributes."""
        x = onnx_helper.make_tensor_value_info("X", TensorProto.FLOAT, [1, 4])
        y = onnx_helper.make_tensor_value_info("Y", TensorProto.FLOAT, [1, 8])
        leaky = onnx_helper.make_node("LeakyRelu", ["X"], ["h"], name="Leaky_0", alpha=alpha)
        pad = onnx_helper.make_node(
            "Pad", ["h", "pads"], ["Y"], name="Pad_0", mode=mode
        )
        pads = onnx_helper.make_tensor("pads", TensorProto.INT64, [4], [0, 2, 0, 2])
        shape_const = onnx_helper.make_node(
            "ConstantOfShape",
            ["pads"],
            ["unused"],
            name="Fill_0",
            value=onnx_helper.make_tensor("v", TensorProto.FLOAT, [1], [3.0]),
        )
        return SyntheticONNXModels.make_model(
            [leaky, pad, shape_const], [x], [y], initializers=(pads,)
        )
