"""
Custom exceptions for the locale data generator.

This module contains specialized exception classes for handling missing
locale data, invalid random-draw arguments, template resolution problems,
and document loading failures.
"""

from pathlib import Path


class MirageDataGenException(Exception):
    """Base exception for all mirage data generator errors."""

    pass


class UnsupportedLocaleError(MirageDataGenException, ValueError):
    """Exception raised when a locale code is not one of the supported locales."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unsupported locale: {code}")


class MissingDataError(MirageDataGenException):
    """Exception raised when a category or field has no locale-specific data."""

    MISSING_CATEGORY = "missing_category"
    MISSING_FIELD = "missing_field"
    EMPTY_FIELD = "empty_field"

    def __init__(
        self,
        category: str,
        field: str,
        locale: object,
        reason: str = MISSING_FIELD,
    ):
        self.category = category
        self.field = field
        self.locale = locale
        self.reason = reason

        message = f"Missing locale-specific data for {category}.{field} in locale {locale}"

        if reason == self.MISSING_CATEGORY:
            message = f"{message} (no '{category}' document found)"
        elif reason == self.EMPTY_FIELD:
            message = f"{message} (field is present but empty)"

        super().__init__(message)


class EmptyInputError(MirageDataGenException, ValueError):
    """Exception raised when a random choice is requested from an empty sequence."""

    def __init__(self, message: str = "Cannot choose from an empty sequence"):
        super().__init__(message)


class InvalidRangeError(MirageDataGenException, ValueError):
    """Exception raised when a numeric range is inverted or out of domain."""

    def __init__(self, message: str, lower: object = None, upper: object = None):
        self.lower = lower
        self.upper = upper

        if lower is not None or upper is not None:
            message = f"{message} (min={lower}, max={upper})"

        super().__init__(message)


class TemplateResolutionError(MirageDataGenException):
    """Exception raised when a template token has no generator to resolve it."""

    def __init__(self, token: str, pattern: str, message: str | None = None):
        self.token = token
        self.pattern = pattern
        super().__init__(
            message
            or f"No generator registered for token '{{{{{token}}}}}' in pattern '{pattern}'"
        )


class DocumentLoadError(MirageDataGenException):
    """Exception raised when a data document exists but cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: Path | str | None = None,
        original_error: Exception | None = None,
    ):
        self.file_path = file_path
        self.original_error = original_error

        if file_path:
            message = f"Error loading data document '{file_path}': {message}"

        if original_error:
            message = f"{message} (Original error: {original_error})"

        super().__init__(message)


class DocumentParsingError(DocumentLoadError):
    """Exception raised when YAML parsing fails or the document has the wrong shape."""

    def __init__(
        self,
        file_path: Path | str,
        message: str = "YAML parsing failed",
        original_error: Exception | None = None,
    ):
        super().__init__(message, file_path, original_error)


class ValidationIOError(MirageDataGenException):
    """
    Exception raised when a document cannot be read during schema validation.

    The validator records these into the validation result instead of
    propagating them, so a sweep continues past an unreadable file.
    """

    def __init__(
        self,
        file_path: Path | str,
        original_error: Exception | None = None,
    ):
        self.file_path = file_path
        self.original_error = original_error

        message = f"Error loading YAML file '{file_path}'"
        if original_error:
            message = f"{message}: {original_error}"

        super().__init__(message)
