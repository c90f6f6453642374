"""Stage 1: Model normalization.

Converts decoded ONNX structures into the canonical specs defined in
:mod:`onnxcompare.normalize.types`, with one name map per category.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "get_node_key",
    "normalize_graph",
    "normalize_initializers",
    "normalize_model",
    "normalize_model_info",
    "normalize_nodes",
    "normalize_value_infos",
]

from collections.abc import Iterable
from typing import Any

from .attributes import normalize_attributes
from .types import (
    InitializerSpec,
    ModelInfo,
    NameMaps,
    NodeSpec,
    NormalizedGraph,
    NormalizedModel,
    TensorSpec,
)
from .utils import (
    element_type_name,
    get_message_field,
    get_payload_length,
    get_tensor_elem_type,
    get_tensor_shape,
    get_type_key,
    normalize_int64,
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _names(values: Iterable[Any] | None) -> tuple[str, ...]:
    return tuple(_text(v) for v in values or ())


def _normalize_value_info(value_info: Any) -> TensorSpec:
    type_proto = get_message_field(value_info, "type")
    elem_type = get_tensor_elem_type(type_proto)
    shape = get_tensor_shape(type_proto)
    return TensorSpec(
        name=_text(getattr(value_info, "name", "")),
        shape=shape,
        elem_type=elem_type,
        type_name=element_type_name(elem_type),
        type_key=get_type_key(type_proto, elem_type, shape),
        type_proto=type_proto,
    )


def normalize_value_infos(value_infos: Iterable[Any] | None) -> tuple[TensorSpec, ...] | None:
    """Normalize graph inputs, outputs or value annotations.

    :param value_infos: ``ValueInfoProto`` collection, None if missing
    :return: Tensor specs in source order, None if the collection is missing
    """
    if value_infos is None:
        return None
    return tuple(_normalize_value_info(vi) for vi in value_infos)


def _normalize_initializer(tensor: Any) -> InitializerSpec:
    data_type = normalize_int64(getattr(tensor, "data_type", 0) or 0)
    if not isinstance(data_type, int):
        data_type = 0
    dims = tuple(normalize_int64(d) for d in getattr(tensor, "dims", None) or ())
    return InitializerSpec(
        name=_text(getattr(tensor, "name", "")),
        dims=dims,
        data_type=data_type,
        type_name=element_type_name(data_type),
        payload_length=get_payload_length(tensor),
    )


def normalize_initializers(
    initializers: Iterable[Any] | None,
) -> tuple[InitializerSpec, ...] | None:
    """Normalize initializer tensors.

    :param initializers: ``TensorProto`` collection, None if missing
    :return: Initializer specs in source order, None if the collection is missing
    """
    if initializers is None:
        return None
    return tuple(_normalize_initializer(t) for t in initializers)


def get_node_key(name: str, outputs: tuple[str, ...], op_type: str, index: int) -> str:
    """Derive the matching key of a node.

    The explicit name wins, then the first output name. A node with neither
    gets a key synthesized from its operator kind and position.

    :param name: Explicit node name
    :param outputs: Output tensor names
    :param op_type: Operator kind
    :param index: Position of the node in the graph
    :return: Node key
    """
    if name:
        return name
    if outputs and outputs[0]:
        return outputs[0]
    return f"<{op_type or 'node'}:{index}>"


def _normalize_node(node: Any, index: int) -> NodeSpec:
    name = _text(getattr(node, "name", ""))
    op_type = _text(getattr(node, "op_type", ""))
    outputs = _names(getattr(node, "output", None))
    return NodeSpec(
        key=get_node_key(name, outputs, op_type, index),
        name=name,
        op_type=op_type,
        domain=_text(getattr(node, "domain", "")),
        inputs=_names(getattr(node, "input", None)),
        outputs=outputs,
        attributes=normalize_attributes(getattr(node, "attribute", None)),
    )


def normalize_nodes(nodes: Iterable[Any] | None) -> tuple[NodeSpec, ...] | None:
    """Normalize graph nodes.

    :param nodes: ``NodeProto`` collection, None if missing
    :return: Node specs in source order, None if the collection is missing
    """
    if nodes is None:
        return None
    return tuple(_normalize_node(node, idx) for idx, node in enumerate(nodes))


def _name_map(specs: tuple[Any, ...] | None) -> dict[str, Any]:
    # Later entries overwrite earlier ones with the same name
    return {spec.name: spec for spec in specs or ()}


def normalize_graph(graph: Any) -> NormalizedGraph:
    """Normalize every collection of a graph.

    :param graph: ``GraphProto`` or duck-typed object
    :return: Normalized graph with per-category name maps
    """
    inputs = normalize_value_infos(getattr(graph, "input", None))
    outputs = normalize_value_infos(getattr(graph, "output", None))
    initializers = normalize_initializers(getattr(graph, "initializer", None))
    value_info = normalize_value_infos(getattr(graph, "value_info", None))

    maps = NameMaps(
        inputs=_name_map(inputs),
        outputs=_name_map(outputs),
        initializers=_name_map(initializers),
        value_info=_name_map(value_info),
    )
    return NormalizedGraph(
        nodes=normalize_nodes(getattr(graph, "node", None)),
        inputs=inputs,
        outputs=outputs,
        initializers=initializers,
        value_info=value_info,
        maps=maps,
    )


def normalize_model_info(model: Any) -> ModelInfo:
    """Extract model metadata with version fields as exact integers.

    :param model: ``ModelProto`` or duck-typed object
    :return: Model metadata
    """
    opset_imports = {
        _text(getattr(opset, "domain", "")): normalize_int64(getattr(opset, "version", None))
        for opset in getattr(model, "opset_import", None) or ()
    }
    metadata_props = {
        _text(getattr(prop, "key", "")): _text(getattr(prop, "value", ""))
        for prop in getattr(model, "metadata_props", None) or ()
    }
    return ModelInfo(
        ir_version=normalize_int64(getattr(model, "ir_version", None)),
        producer_name=_text(getattr(model, "producer_name", "")),
        producer_version=_text(getattr(model, "producer_version", "")),
        domain=_text(getattr(model, "domain", "")),
        model_version=normalize_int64(getattr(model, "model_version", None)),
        opset_imports=opset_imports,
        metadata_props=metadata_props,
    )


def normalize_model(model: Any) -> NormalizedModel:
    """Normalize a decoded model.

    :param model: ``ModelProto`` or duck-typed object
    :return: Normalized model; ``graph`` is None when the model has no graph
    """
    graph = get_message_field(model, "graph")
    return NormalizedModel(
        info=normalize_model_info(model),
        graph=normalize_graph(graph) if graph is not None else None,
    )
