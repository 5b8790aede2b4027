"""Domain exceptions for the component-to-field-group pipeline.

Filesystem and parser failures are caught at the point they occur and
re-raised as one of these exceptions so that callers only ever have to
handle ``VueAcfError``.
"""

from __future__ import annotations

from pathlib import Path


class VueAcfError(Exception):
    """Base exception for all pipeline errors.

    Attributes:
        detail: A user-facing description of what went wrong.
        path: The file or directory involved, if any.
    """

    def __init__(
        self,
        detail: str,
        *,
        path: Path | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.detail = detail
        self.path = path
        super().__init__(detail)
        if cause is not None:
            self.__cause__ = cause


class SourceError(VueAcfError):
    """Raised when the component source file cannot be obtained."""


class SourceNotFoundError(SourceError):
    """Raised when the component source file does not exist."""


class SourceUnreadableError(SourceError):
    """Raised when the component source file exists but cannot be read."""


class MetadataParseError(VueAcfError):
    """Raised when a provider cannot extract a name and props from the source."""


class UnmappedFieldTypeError(VueAcfError):
    """Raised when a prop resolves to no ACF field type.

    Attributes:
        prop_name: The name of the offending prop.
        declared_type: The primitive type the component declared for it.
    """

    def __init__(self, prop_name: str, declared_type: str) -> None:
        self.prop_name = prop_name
        self.declared_type = declared_type
        super().__init__(f"Prop '{prop_name}' has type '{declared_type}', which has no ACF field mapping.")


class DestinationWriteError(VueAcfError):
    """Raised when the destination directory or JSON file cannot be written."""
