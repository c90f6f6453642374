"""Stage 3: Diff assembly.

Composes the per-category comparisons into one result tree. The whole
comparison is a single synchronous pass with no side effects.
"""

__docformat__ = "restructuredtext"
__all__ = ["compare_graphs", "compare_normalized_models", "compare_onnx_models"]

from typing import Any

from onnxcompare.normalize import NormalizedGraph, NormalizedModel, normalize_model

from .initializers import compare_initializers
from .model_info import compare_metadata, compare_model_info
from .nodes import compare_nodes
from .types import ComparisonResult, GraphDiff
from .values import compare_ios

MISSING_GRAPH = "One or both models don't have a graph"


def compare_graphs(graph1: NormalizedGraph | None, graph2: NormalizedGraph | None) -> GraphDiff:
    """Compare nodes, inputs, outputs and initializers of two graphs.

    :param graph1: Normalized graph of the first model, None if missing
    :param graph2: Normalized graph of the second model, None if missing
    :return: Graph diff, or a graph-level error marker
    """
    if graph1 is None or graph2 is None:
        return GraphDiff(error=MISSING_GRAPH)
    return GraphDiff(
        nodes=compare_nodes(graph1.nodes, graph2.nodes),
        inputs=compare_ios(graph1.inputs, graph2.inputs, category="input"),
        outputs=compare_ios(graph1.outputs, graph2.outputs, category="output"),
        initializers=compare_initializers(graph1.initializers, graph2.initializers),
    )


def compare_normalized_models(
    model1: NormalizedModel, model2: NormalizedModel
) -> ComparisonResult:
    """Compare two normalized models.

    :param model1: First normalized model
    :param model2: Second normalized model
    :return: Comparison result with both models' name maps
    """
    return ComparisonResult(
        model_info=compare_model_info(model1.info, model2.info),
        graphs=compare_graphs(model1.graph, model2.graph),
        metadata=compare_metadata(model1.info, model2.info),
        lookups1=model1.graph.maps if model1.graph is not None else None,
        lookups2=model2.graph.maps if model2.graph is not None else None,
    )


def compare_onnx_models(model1: Any, model2: Any) -> ComparisonResult:
    """Compare two decoded ONNX models.

    Neither model is modified.

    :param model1: First ``ModelProto``
    :param model2: Second ``ModelProto``
    :return: Comparison result
    """
    return compare_normalized_models(normalize_model(model1), normalize_model(model2))
