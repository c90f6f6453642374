"""Node comparison.

Operator arguments are positional, so node inputs and outputs are compared
index by index rather than as sets.
"""

__docformat__ = "restructuredtext"
__all__ = ["compare_node_pair", "compare_nodes", "compare_sequences"]

from collections.abc import Sequence

from onnxcompare.match import match_entities
from onnxcompare.normalize import NodeSpec

from .attributes import compare_attributes
from .types import CategoryDiff, FieldDiff, IndexDiff, NodeDiff, SequenceDiff

MISSING_NODES = "One or both graphs don't have nodes"


def compare_sequences(seq1: Sequence[str] | None, seq2: Sequence[str] | None) -> SequenceDiff:
    """Compare two ordered name lists position by position.

    Positions past the end of the shorter list compare against None and are
    always reported.

    :param seq1: Names from the first model
    :param seq2: Names from the second model
    :return: Positional detail
    """
    seq1 = tuple(seq1 or ())
    seq2 = tuple(seq2 or ())
    is_different = len(seq1) != len(seq2)
    details = []
    for idx in range(max(len(seq1), len(seq2))):
        value1 = seq1[idx] if idx < len(seq1) else None
        value2 = seq2[idx] if idx < len(seq2) else None
        if value1 != value2 or value1 is None or value2 is None:
            is_different = True
            details.append(IndexDiff(idx, value1, value2))
    return SequenceDiff(is_different, tuple(details))


def compare_node_pair(node1: NodeSpec, node2: NodeSpec) -> NodeDiff:
    """Compare two nodes sharing a key.

    An op_type mismatch does not stop the comparison of arguments and
    attributes.

    :param node1: Node from the first model
    :param node2: Node from the second model
    :return: Node detail
    """
    return NodeDiff(
        op_type=FieldDiff.of(node1.op_type, node2.op_type),
        inputs=compare_sequences(node1.inputs, node2.inputs),
        outputs=compare_sequences(node1.outputs, node2.outputs),
        attributes=compare_attributes(node1.attributes, node2.attributes),
    )


def compare_nodes(
    nodes1: Sequence[NodeSpec] | None, nodes2: Sequence[NodeSpec] | None
) -> CategoryDiff:
    """Compare the nodes of two graphs.

    :param nodes1: Nodes of the first graph, None if missing
    :param nodes2: Nodes of the second graph, None if missing
    :return: Node category diff
    """
    if nodes1 is None or nodes2 is None:
        return CategoryDiff.missing(MISSING_NODES)
    entries = match_entities(
        nodes1, nodes2, compare_node_pair, key=lambda node: node.key, category="node"
    )
    return CategoryDiff(len(nodes1), len(nodes2), entries)
