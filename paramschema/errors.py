"""Exceptions raised while building request param schemas.

None of these escape json_from_action; they mark the points where the
pipeline degrades to a simpler result.
"""

from __future__ import annotations


class ParamSchemaError(Exception):
    """Base class for schema generation errors."""


class MetadataNotFound(ParamSchemaError, LookupError):
    """No action method is registered for the requested action id."""

    def __init__(self, action_id: str, method_name: str) -> None:
        super().__init__(f"no action method {method_name!r} for action id {action_id!r}")
        self.action_id = action_id
        self.method_name = method_name


class OverrideEncodingError(ParamSchemaError, ValueError):
    """A custom schema override could not be encoded or parsed as JSON."""


class AnnotationParseError(ParamSchemaError, ValueError):
    """An editor annotation value looks like JSON but does not parse."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(f"invalid JSON for editor field {key!r}: {reason}")
        self.key = key
        self.value = value
