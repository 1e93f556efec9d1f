"""
Cross-locale schema validation.

Every locale's data documents must have the same key structure, in the same
order, as the reference locale's documents. Leaf values are never compared:
locales legitimately differ in content, not in shape.
"""

import logging
from typing import Any

from ..config.models import MirageConfig
from ..shared.document_loader import DocumentResolver
from ..shared.exceptions import DocumentLoadError, ValidationIOError
from ..shared.locale import REFERENCE_LOCALE, Locale
from ..shared.logging_utils import get_structured_logger
from .models import MappingNode, NodeKind, StructureDiff, ValidationResult, build_tree

logger = logging.getLogger(__name__)


def _compare_mappings(
    reference: MappingNode,
    target: MappingNode,
    path: str,
    missing: list[str],
    extra: list[str],
    errors: list[str],
) -> bool:
    """Compare one mapping level, recursing into shared mapping children."""
    reference_children = reference.children()
    target_children = target.children()
    reference_keys = reference.keys()
    target_keys = target.keys()

    same_order = True

    for key in reference_keys:
        current_path = f"{path}.{key}" if path else key
        if key not in target_children:
            missing.append(current_path)
            continue

        reference_child = reference_children[key]
        target_child = target_children[key]
        if reference_child.kind is NodeKind.MAPPING and target_child.kind is NodeKind.MAPPING:
            if not _compare_mappings(
                reference_child, target_child, current_path, missing, extra, errors
            ):
                same_order = False

    for key in target_keys:
        if key not in reference_children:
            extra.append(f"{path}.{key}" if path else key)

    common_reference = [key for key in reference_keys if key in target_children]
    common_target = [key for key in target_keys if key in reference_children]
    if common_reference and common_reference != common_target:
        same_order = False
        errors.append(f"Keys at {path or 'root'} are not in the same order")

    return same_order


def compare(reference_data: Any, target_data: Any) -> StructureDiff:
    """
    Diff the key structure of two parsed documents.

    Returns:
        StructureDiff with dotted key paths; empty when either root is not a mapping
    """
    reference = build_tree(reference_data)
    target = build_tree(target_data)

    if reference.kind is not NodeKind.MAPPING or target.kind is not NodeKind.MAPPING:
        return StructureDiff()

    missing: list[str] = []
    extra: list[str] = []
    errors: list[str] = []
    same_order = _compare_mappings(reference, target, "", missing, extra, errors)

    return StructureDiff(
        missing_keys=tuple(missing),
        extra_keys=tuple(extra),
        keys_in_same_order=same_order,
        errors=tuple(errors),
    )


class SchemaValidator:
    """
    Validates locale data documents against the reference locale.

    Args:
        resolver: Document resolver; built from ``config`` when omitted
        config: Configuration supplying the data path and packaged-data flag
    """

    def __init__(
        self,
        resolver: DocumentResolver | None = None,
        config: MirageConfig | None = None,
    ):
        if resolver is None:
            config = config or MirageConfig()
            resolver = DocumentResolver(config.data_path, config.use_packaged_data)
        self.resolver = resolver
        self.reference_locale = REFERENCE_LOCALE
        self._log = get_structured_logger(__name__)

    def _load(self, name: str, locale: Locale) -> dict[str, Any] | None:
        """
        Load a document for validation.

        Raises:
            ValidationIOError: If the document exists but cannot be read or parsed
        """
        try:
            return self.resolver.load(name, locale)
        except DocumentLoadError as e:
            raise ValidationIOError(e.file_path or name, e.original_error or e)
        except OSError as e:
            raise ValidationIOError(name, e)

    def reference_documents(self) -> list[str]:
        """Names of the documents every locale is required to have."""
        return self.resolver.list_documents(self.reference_locale)

    def validate_file(self, name: str, target: Locale | str) -> ValidationResult:
        """
        Validate one document of a locale.

        Read failures are recorded in the result's errors and never raised.

        Raises:
            UnsupportedLocaleError: If ``target`` is not a supported locale code
        """
        target = Locale.from_code(target)
        errors: list[str] = []
        reference_data = None

        try:
            reference_data = self._load(name, self.reference_locale)
        except ValidationIOError as e:
            logger.warning(str(e))
            errors.append(str(e))

        try:
            target_data = self._load(name, target)
        except ValidationIOError as e:
            logger.warning(str(e))
            errors.append(str(e))
            return ValidationResult(name, target, file_exists=True, errors=tuple(errors))

        if target_data is None:
            return ValidationResult(name, target, file_exists=False, errors=tuple(errors))

        if reference_data is None:
            if not errors:
                errors.append(
                    f"Reference document {name} not found for locale {self.reference_locale}"
                )
            return ValidationResult(name, target, file_exists=True, errors=tuple(errors))

        diff = compare(reference_data, target_data)
        return ValidationResult(
            file_name=name,
            locale=target,
            file_exists=True,
            missing_keys=diff.missing_keys,
            extra_keys=diff.extra_keys,
            keys_in_same_order=diff.keys_in_same_order,
            errors=tuple(errors) + diff.errors,
        )

    def validate_locale(self, target: Locale | str) -> list[ValidationResult]:
        """
        Validate every reference document for a locale.

        Raises:
            UnsupportedLocaleError: If ``target`` is not a supported locale code
        """
        target = Locale.from_code(target)
        names = self.reference_documents()

        with self._log.correlated():
            self._log.info(
                "Validating locale",
                locale=target.code,
                reference=self.reference_locale.code,
                documents=names,
            )

            results = [self.validate_file(name, target) for name in names]

            invalid = [result.file_name for result in results if not result.is_valid()]
            self._log.info(
                "Locale validation finished",
                locale=target.code,
                valid=len(results) - len(invalid),
                total=len(results),
                invalid=invalid,
            )
        return results
