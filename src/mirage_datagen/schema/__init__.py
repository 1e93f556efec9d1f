"""Structural validation of locale data documents against the reference locale."""

from .models import MappingNode, ScalarNode, SequenceNode, ValidationResult, build_tree
from .validator import SchemaValidator, compare

__all__ = [
    "MappingNode",
    "ScalarNode",
    "SchemaValidator",
    "SequenceNode",
    "ValidationResult",
    "build_tree",
    "compare",
]
