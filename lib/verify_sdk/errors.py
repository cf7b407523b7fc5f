from __future__ import annotations


class VerifySdkError(Exception):
    """Base SDK error."""


class ConfigurationError(VerifySdkError):
    def __init__(self, missing: tuple[str, ...] | list[str]):
        self.missing = tuple(missing)
        super().__init__(
            "Building a client descriptor failed due to missing parameters: " + ", ".join(self.missing)
        )


class MalformedSerializedFormError(VerifySdkError):
    """Serialized descriptor bytes are truncated or not in the expected layout."""

    def __init__(self, message: str, field: str | None = None):
        if field:
            message = f"{message} (field: {field})"
        super().__init__(message)
        self.field = field
