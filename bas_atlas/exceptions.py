"""
Errors raised by the catalog build.

Every error is fatal for the build. The CLI reports the message and exits
non-zero; nothing below is meant to be caught and recovered from inside the
pipeline.
"""

from typing import Optional


class AtlasError(Exception):
    """Base error for the catalog build."""

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __str__(self):
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class ParseError(AtlasError):
    """A source file does not contain valid JSON."""

    def __init__(self, path, detail: Optional[str] = None):
        self.path = str(path)
        super().__init__(f"Error parsing {self.path}", detail)


class SourceIOError(AtlasError):
    """A source file could not be read."""

    def __init__(self, path, detail: Optional[str] = None):
        self.path = str(path)
        super().__init__(f"Cannot read {self.path}", detail)


class ArtifactWriteError(AtlasError):
    """An output artifact could not be written."""

    def __init__(self, path, detail: Optional[str] = None):
        self.path = str(path)
        super().__init__(f"Cannot write {self.path}", detail)


class ValidationError(AtlasError):
    """The dataset violates an integrity rule."""


class SchemaError(ValidationError):
    """Missing or duplicate identifier, dangling reference, or malformed record."""

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        entity_id: Optional[str] = None,
        reference: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        self.kind = kind
        self.entity_id = entity_id
        self.reference = reference
        super().__init__(message, detail)


class ExternalValidationError(ValidationError):
    """An artifact or record was rejected by the schema oracle."""

    def __init__(self, label: str, errors: list[str]):
        self.label = label
        self.errors = list(errors)
        super().__init__(f"{label} invalid", "; ".join(self.errors))
