"""Custom exception hierarchy for plwordnet."""

from __future__ import annotations


class PlWordNetError(Exception):
    """Base exception for all plwordnet errors."""


class LoadIOError(PlWordNetError):
    """The source file could not be opened or read."""


class MalformedXmlError(PlWordNetError):
    """The XML tokenizer rejected the input."""

    def __init__(self, message: str, position: tuple[int, int] | None = None):
        self.position = position
        if position is not None:
            message = f"{message} (line {position[0]}, column {position[1]})"
        super().__init__(message)


class InvalidAttributeValueError(PlWordNetError):
    """An attribute is present but does not parse as its declared type."""

    def __init__(self, tag: str, field: str, raw_value: str):
        self.tag = tag
        self.field = field
        self.raw_value = raw_value
        super().__init__(
            f"Invalid value for {tag}.{field}: {raw_value!r}"
        )


class MissingRootError(PlWordNetError):
    """End of input reached without seeing the root container."""


class UnexpectedElementError(PlWordNetError):
    """An element appeared where no parser transition accepts it."""

    def __init__(self, tag: str, message: str | None = None):
        self.tag = tag
        super().__init__(message or f"Unexpected element: <{tag}>")


class ConfigError(PlWordNetError):
    """Invalid configuration file or value."""
