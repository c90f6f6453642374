"""Plain-text rendering of comparison results."""

__docformat__ = "restructuredtext"
__all__ = ["render_text"]

from onnxcompare.compare import CategoryDiff, ComparisonResult
from onnxcompare.match import DiffEntry, DiffStatus
from onnxcompare.normalize import MISSING_DISPLAY, NameMaps, NodeSpec

from ._lookup import (
    format_attribute_value,
    format_shape,
    format_type,
    get_shape_string,
    split_node_inputs,
)

_STATUS_MARKS = {
    DiffStatus.ADDED: "+",
    DiffStatus.REMOVED: "-",
    DiffStatus.MODIFIED: "~",
    DiffStatus.UNCHANGED: "=",
}

_INDENT = "    "


def _describe_node_changes(
    node1: NodeSpec, node2: NodeSpec, maps1: NameMaps | None, maps2: NameMaps | None
) -> list[str]:
    """Describe how a node changed, resolving shapes through the name maps."""
    lines = []
    if node1.op_type != node2.op_type:
        lines.append(f"op_type: {node1.op_type} -> {node2.op_type}")

    data1, params1 = split_node_inputs(node1.inputs, maps1)
    data2, params2 = split_node_inputs(node2.inputs, maps2)
    for idx in range(max(len(data1), len(data2))):
        shape1 = get_shape_string(data1[idx] if idx < len(data1) else None, maps1)
        shape2 = get_shape_string(data2[idx] if idx < len(data2) else None, maps2)
        if shape1 != shape2:
            lines.append(f"Data Input {idx} Shape: {shape1} -> {shape2}")

    for idx in range(max(len(params1), len(params2))):
        name1 = params1[idx] if idx < len(params1) else "N/A"
        name2 = params2[idx] if idx < len(params2) else "N/A"
        shape1 = get_shape_string(name1, maps1)
        shape2 = get_shape_string(name2, maps2)
        if shape1 != shape2 or name1 != name2:
            label = f"Param Input {idx}"
            if name1 == name2:
                label = f"{label} ({name1}) Shape"
            lines.append(f"{label}: {shape1} -> {shape2}")

    for idx in range(max(len(node1.outputs), len(node2.outputs))):
        name1 = node1.outputs[idx] if idx < len(node1.outputs) else None
        name2 = node2.outputs[idx] if idx < len(node2.outputs) else None
        shape1 = get_shape_string(name1, maps1)
        shape2 = get_shape_string(name2, maps2)
        if shape1 != shape2:
            lines.append(f"Output {idx} Shape: {shape1} -> {shape2}")
    return lines


def _describe_entry(
    category: str, entry: DiffEntry, maps1: NameMaps | None, maps2: NameMaps | None
) -> list[str]:
    if entry.status in (DiffStatus.ADDED, DiffStatus.REMOVED, DiffStatus.UNCHANGED):
        return []
    changes = entry.changes
    lines = []
    if category == "nodes":
        lines.extend(_describe_node_changes(entry.model1, entry.model2, maps1, maps2))
        for position in changes.inputs.details:
            lines.append(f"input {position.index}: {position.model1} -> {position.model2}")
        for position in changes.outputs.details:
            lines.append(f"output {position.index}: {position.model1} -> {position.model2}")
        for name, attr_entry in changes.attributes.items():
            if attr_entry.is_different:
                value1 = format_attribute_value(attr_entry.model1)
                value2 = format_attribute_value(attr_entry.model2)
                lines.append(f"{name}: {value1} -> {value2}")
    elif category in ("inputs", "outputs"):
        lines.append(f"type: {changes.element_type.model1} -> {changes.element_type.model2}")
        lines.append(
            f"shape: {format_shape(changes.shape.model1)} -> {format_shape(changes.shape.model2)}"
        )
        if not changes.element_type.is_different and not changes.shape.is_different:
            declared = changes.declared_type
            lines.append(
                f"declared type: {format_type(declared.model1)} -> {format_type(declared.model2)}"
            )
    elif category == "initializers":
        lines.append(f"data type: {changes.data_type.model1} -> {changes.data_type.model2}")
        lines.append(
            f"dims: {format_shape(changes.dims.model1)} -> {format_shape(changes.dims.model2)}"
        )
        if changes.content_different:
            lines.append(
                f"payload: {entry.model1.payload_length} -> {entry.model2.payload_length} bytes"
            )
    return lines


def _entry_title(category: str, entry: DiffEntry) -> str:
    if category != "nodes":
        return entry.key
    node = entry.model1 if entry.model1 is not None else entry.model2
    return f"{entry.key} ({node.op_type or MISSING_DISPLAY})"


def _render_category(
    title: str,
    category_name: str,
    category: CategoryDiff,
    maps1: NameMaps | None,
    maps2: NameMaps | None,
    show_unchanged: bool,
) -> list[str]:
    lines = [title]
    if category.error:
        lines.append(f"{_INDENT}Error: {category.error}")
        return lines
    lines.append(
        f"{_INDENT}Model 1: {category.model1_count} {category_name} | "
        f"Model 2: {category.model2_count} {category_name}"
    )
    entries = category.entries if show_unchanged else category.differences
    if not entries:
        lines.append(f"{_INDENT}No differences found in {category_name}.")
        return lines
    for entry in entries.values():
        lines.append(f"{_INDENT}{_STATUS_MARKS[entry.status]} {_entry_title(category_name, entry)}")
        for detail in _describe_entry(category_name, entry, maps1, maps2):
            lines.append(f"{_INDENT * 2}{detail}")
    return lines


def render_text(
    result: ComparisonResult,
    model1_name: str = "Model 1",
    model2_name: str = "Model 2",
    show_unchanged: bool = False,
) -> str:
    """Render a comparison result as a plain-text report.

    :param result: Comparison result
    :param model1_name: Display name of the first model
    :param model2_name: Display name of the second model
    :param show_unchanged: Whether to list unchanged entries too
    :return: Report text
    """
    lines = ["ONNX Model Comparison", f"Model 1: {model1_name}", f"Model 2: {model2_name}", ""]

    lines.append("Model Information")
    for field_name, diff in result.model_info.items():
        status = "different" if diff.is_different else "same"
        lines.append(f"{_INDENT}{field_name}: {diff.model1!r} | {diff.model2!r} ({status})")
    lines.append("")

    graphs = result.graphs
    if graphs.error:
        lines.append(f"Graph Comparison: {graphs.error}")
    else:
        titles = {
            "inputs": "Inputs",
            "outputs": "Outputs",
            "nodes": "Nodes (Operators)",
            "initializers": "Initializers (Weights and Constants)",
        }
        for name in ("inputs", "outputs", "nodes", "initializers"):
            lines.extend(
                _render_category(
                    titles[name],
                    name,
                    getattr(graphs, name),
                    result.lookups1,
                    result.lookups2,
                    show_unchanged,
                )
            )
            lines.append("")

    metadata_lines = []
    for label, entries in (
        ("opset", result.metadata.opset_imports),
        ("metadata", result.metadata.metadata_props),
    ):
        for key, entry in entries.items():
            if entry.is_different or show_unchanged:
                value1 = entry.model1[1] if entry.model1 is not None else MISSING_DISPLAY
                value2 = entry.model2[1] if entry.model2 is not None else MISSING_DISPLAY
                mark = _STATUS_MARKS[entry.status]
                metadata_lines.append(f"{_INDENT}{mark} {label} '{key}': {value1} -> {value2}")
    if metadata_lines:
        lines.append("Metadata")
        lines.extend(metadata_lines)

    return "\n".join(lines).rstrip() + "\n"
