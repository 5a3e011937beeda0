"""Fatal error taxonomy shared by every pipeline stage."""

from __future__ import annotations


class SluaTypesError(Exception):
    """Base class for errors that abort a generation run."""


class CatalogueFormatError(SluaTypesError, ValueError):
    """Input catalogue could not be decoded into the expected structure."""


class UnsupportedFormatError(CatalogueFormatError):
    """Input file extension has no registered reader."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension or '<none>'}")


class DocumentStructureError(SluaTypesError, RuntimeError):
    """Markup events violated open/close nesting."""


class UnknownSourceTypeError(SluaTypesError, ValueError):
    """A catalogue type name has no entry in the remap table."""

    def __init__(self, type_name: str | None) -> None:
        self.type_name = type_name
        super().__init__(f"Unknown source type {type_name!r}")


class PatchError(SluaTypesError, ValueError):
    """A patch record is malformed or its path does not resolve."""


class DocumentShapeError(SluaTypesError, ValueError):
    """Plain data cannot be read back into the typed model."""
