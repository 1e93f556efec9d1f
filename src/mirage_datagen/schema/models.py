"""
Tree and result models for schema validation.

Parsed documents are converted into a tagged tree before comparison. Every
node is a scalar, a sequence or an ordered mapping, and the comparison only
ever descends into pairs of mapping nodes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..shared.locale import Locale


class NodeKind(str, Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass(frozen=True)
class ScalarNode:
    kind: ClassVar[NodeKind] = NodeKind.SCALAR

    value: Any


@dataclass(frozen=True)
class SequenceNode:
    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE

    items: tuple["SchemaNode", ...]


@dataclass(frozen=True)
class MappingNode:
    kind: ClassVar[NodeKind] = NodeKind.MAPPING

    entries: tuple[tuple[str, "SchemaNode"], ...]

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def children(self) -> dict[str, "SchemaNode"]:
        return dict(self.entries)


SchemaNode = ScalarNode | SequenceNode | MappingNode


def build_tree(data: Any) -> SchemaNode:
    """Convert parsed YAML into a tagged tree; mapping keys become strings."""
    if isinstance(data, dict):
        return MappingNode(tuple((str(key), build_tree(value)) for key, value in data.items()))
    if isinstance(data, (list, tuple)):
        return SequenceNode(tuple(build_tree(item) for item in data))
    return ScalarNode(data)


@dataclass(frozen=True)
class StructureDiff:
    """Key-shape differences between a reference tree and a target tree."""

    missing_keys: tuple[str, ...] = ()
    extra_keys: tuple[str, ...] = ()
    keys_in_same_order: bool = True
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one document of one locale against the reference locale."""

    file_name: str
    locale: Locale
    file_exists: bool
    missing_keys: tuple[str, ...] = ()
    extra_keys: tuple[str, ...] = ()
    keys_in_same_order: bool = True
    errors: tuple[str, ...] = ()

    def is_valid(self) -> bool:
        return (
            self.file_exists
            and self.keys_in_same_order
            and not self.missing_keys
            and not self.extra_keys
            and not self.errors
        )

    def __str__(self) -> str:
        lines = [f"Validation result for {self.file_name} in locale {self.locale.code}:"]

        if not self.file_exists:
            lines.append("- File does not exist")
        elif self.is_valid():
            lines.append("- Valid: All keys match the reference file")
        else:
            if self.missing_keys:
                lines.append(f"- Missing keys: {', '.join(self.missing_keys)}")
            if self.extra_keys:
                lines.append(f"- Extra keys: {', '.join(self.extra_keys)}")
            if not self.keys_in_same_order:
                lines.append("- Keys are not in the same order as the reference file")
            if self.errors:
                lines.append(f"- Errors: {', '.join(self.errors)}")

        return "\n".join(lines) + "\n"
