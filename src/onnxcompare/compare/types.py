"""Stage 3: Comparison Result Type Definitions.

Field-level detail records and the assembled result tree.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "CategoryDiff",
    "ComparisonResult",
    "FieldDiff",
    "GraphDiff",
    "IndexDiff",
    "InitializerDiff",
    "IODiff",
    "MetadataDiff",
    "ModelInfoDiff",
    "NodeDiff",
    "SequenceDiff",
    "ValueDiff",
]

from dataclasses import dataclass, fields
from typing import Any

from onnxcompare.match import DiffEntry, DiffStatus
from onnxcompare.normalize import NameMaps


@dataclass(frozen=True)
class FieldDiff:
    """One field compared across both models.

    :param model1: Value in the first model
    :param model2: Value in the second model
    :param is_different: Whether the values differ
    """

    model1: Any
    model2: Any
    is_different: bool

    @classmethod
    def of(cls, value1: Any, value2: Any) -> "FieldDiff":
        return cls(value1, value2, value1 != value2)


@dataclass(frozen=True)
class IndexDiff:
    """Differing position of an ordered name list."""

    index: int
    model1: str | None
    model2: str | None


@dataclass(frozen=True)
class SequenceDiff:
    """Positional comparison of two ordered name lists.

    :param is_different: Whether lengths or any position differ
    :param details: Differing positions; empty when equal
    """

    is_different: bool
    details: tuple[IndexDiff, ...]

    @property
    def are_equal(self) -> bool:
        return not self.is_different


@dataclass(frozen=True)
class ValueDiff:
    """Comparison of two values with no further structure (attributes, metadata)."""

    model1: Any
    model2: Any
    is_different: bool


@dataclass(frozen=True)
class NodeDiff:
    """Field detail for a node present in both models."""

    op_type: FieldDiff
    inputs: SequenceDiff
    outputs: SequenceDiff
    attributes: dict[str, DiffEntry]

    @property
    def is_different(self) -> bool:
        return (
            self.op_type.is_different
            or self.inputs.is_different
            or self.outputs.is_different
            or any(entry.is_different for entry in self.attributes.values())
        )


@dataclass(frozen=True)
class IODiff:
    """Field detail for a graph input or output present in both models.

    ``is_different`` follows the full type descriptor, which can differ even
    when element type and shape agree (e.g. dimension denotations or
    sequence types).

    :param element_type: Element type display names
    :param shape: Normalized dims
    :param declared_type: Both declared ``TypeProto`` objects
    :param is_different: Whether the declared types differ
    """

    element_type: FieldDiff
    shape: FieldDiff
    declared_type: FieldDiff
    is_different: bool


@dataclass(frozen=True)
class InitializerDiff:
    """Field detail for an initializer present in both models.

    ``content_different`` only compares payload byte lengths; equal lengths
    with different bytes are not detected.
    """

    data_type: FieldDiff
    dims: FieldDiff
    content_different: bool

    @property
    def is_different(self) -> bool:
        return self.data_type.is_different or self.dims.is_different or self.content_different


@dataclass(frozen=True)
class ModelInfoDiff:
    """Per-field comparison of model metadata."""

    ir_version: FieldDiff
    producer_name: FieldDiff
    producer_version: FieldDiff
    domain: FieldDiff
    model_version: FieldDiff

    def items(self) -> list[tuple[str, FieldDiff]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    @property
    def is_different(self) -> bool:
        return any(diff.is_different for _, diff in self.items())


@dataclass(frozen=True)
class CategoryDiff:
    """Diff of one entity category.

    :param model1_count: Entity count in the first model (None on error)
    :param model2_count: Entity count in the second model (None on error)
    :param entries: Diff entry per key, unchanged keys included
    :param error: Error marker when the category is missing on a side
    """

    model1_count: int | None
    model2_count: int | None
    entries: dict[str, DiffEntry]
    error: str | None = None

    @classmethod
    def missing(cls, message: str) -> "CategoryDiff":
        return cls(None, None, {}, message)

    @property
    def differences(self) -> dict[str, DiffEntry]:
        """Entries whose status is not unchanged."""
        return {k: e for k, e in self.entries.items() if e.is_different}

    def with_status(self, status: DiffStatus) -> dict[str, DiffEntry]:
        return {k: e for k, e in self.entries.items() if e.status is status}


@dataclass(frozen=True)
class GraphDiff:
    """Diff of the graph categories, or a graph-level error marker."""

    nodes: CategoryDiff | None = None
    inputs: CategoryDiff | None = None
    outputs: CategoryDiff | None = None
    initializers: CategoryDiff | None = None
    error: str | None = None

    def categories(self) -> list[tuple[str, CategoryDiff]]:
        names = ("nodes", "inputs", "outputs", "initializers")
        return [(name, getattr(self, name)) for name in names if getattr(self, name) is not None]


@dataclass(frozen=True)
class MetadataDiff:
    """Comparison of auxiliary model metadata.

    :param opset_imports: Opset versions matched by domain
    :param metadata_props: Metadata properties matched by key
    """

    opset_imports: dict[str, DiffEntry]
    metadata_props: dict[str, DiffEntry]


@dataclass(frozen=True)
class ComparisonResult:
    """Complete comparison of two models.

    The name maps let presentation code resolve types and shapes of tensors
    referenced only by name in node input/output lists.

    :param model_info: Model metadata comparison
    :param graphs: Graph comparison
    :param metadata: Auxiliary metadata comparison
    :param lookups1: Name maps of the first model (None without graph)
    :param lookups2: Name maps of the second model (None without graph)
    """

    model_info: ModelInfoDiff
    graphs: GraphDiff
    metadata: MetadataDiff
    lookups1: NameMaps | None
    lookups2: NameMaps | None

    @property
    def has_differences(self) -> bool:
        if self.model_info.is_different or self.graphs.error:
            return True
        for _, category in self.graphs.categories():
            if category.error or category.differences:
                return True
        return any(
            entry.is_different
            for entries in (self.metadata.opset_imports, self.metadata.metadata_props)
            for entry in entries.values()
        )
