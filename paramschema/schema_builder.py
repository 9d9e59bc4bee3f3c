"""Build the request params JSON Schema for an action.

Precedence, highest first:
- full schema override ({actionId}ActionParamSchema)
- per-parameter override ({actionId}ActionParam{Name}) + editor fields
- default: one string field per parameter

Handles:
- False from a per-parameter override hides the parameter
- Mapping results become enum / options.enum_titles (order preserved);
  list or tuple results are indexed from 0, like a mapping of position -> label
- JSON-looking editor values are decoded
- Required string fields get minLength 1 unless set explicitly
- NaN and Infinity are rejected: output must parse as strict JSON
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable

from .annotations import parse_editor_value
from .errors import AnnotationParseError, OverrideEncodingError
from .naming import camel_to_words
from .registry import ActionDescriptor, ParameterDescriptor, bind

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Request Params"
TRANSLATION_CATEGORY = "pages"

# Returned whenever the action cannot be resolved: free-form string params
DEFAULT_JSON_SCHEMA = json.dumps({
    "title": DEFAULT_TITLE,
    "type": "object",
    "format": "table",
    "properties": {},
    "additionalProperties": {"type": "string"},
})

Translate = Callable[[str, str], str]


def no_translation(category: str, message: str) -> str:
    """Identity translation used when the host provides none."""
    return message


def default_json_schema() -> str:
    """Fallback schema document as a JSON string."""
    return DEFAULT_JSON_SCHEMA


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def dumps(value: Any) -> str:
    """json.dumps that refuses NaN and Infinity."""
    return json.dumps(value, allow_nan=False)


def encode_schema(schema: Any) -> str:
    """Serialize a custom schema value, or raise OverrideEncodingError.

    Strings must already be valid JSON and are returned unchanged.
    """
    if isinstance(schema, str):
        try:
            json.loads(schema, parse_constant=_reject_constant)
        except ValueError as e:
            raise OverrideEncodingError(f"schema string is not valid JSON: {e}") from e
        return schema
    try:
        return dumps(schema)
    except (TypeError, ValueError) as e:
        raise OverrideEncodingError(f"schema is not JSON serializable: {e}") from e


def custom_schema(
    descriptor: ActionDescriptor,
    owner: Any = None,
) -> str | None:
    """Full schema from the action's schema override, if it supplies one.

    Returns None when there is no override, it returned an unsupported
    value, or its value could not be encoded.
    """
    if descriptor.schema_override is None:
        return None

    schema = bind(descriptor.schema_override, owner)(list(descriptor.parameters))
    if not isinstance(schema, (Mapping, list, tuple, str)):
        return None
    if isinstance(schema, Mapping):
        schema = dict(schema)

    try:
        return encode_schema(schema)
    except OverrideEncodingError as e:
        logger.warning(
            "Ignoring schema override for action %r: %s", descriptor.action_id, e,
        )
        return None


def apply_editor_fields(
    prop: dict[str, Any], fields: Mapping[str, Any], action_id: str = "",
) -> None:
    """Assign editor fields onto a property schema, decoding JSON-looking values."""
    for key, value in fields.items():
        try:
            prop[key] = parse_editor_value(key, value, strict=True)
        except AnnotationParseError as e:
            logger.warning("Keeping raw editor value for %s.%s: %s", action_id, key, e)
            prop[key] = e.value


def apply_enum(prop: dict[str, Any], options: Mapping[Any, Any]) -> None:
    """Set enum and options.enum_titles from a value -> label mapping."""
    # Keep native keys for non-string types, e.g. integer ids
    if prop.get("type") == "string":
        prop["enum"] = [str(k) for k in options.keys()]
    else:
        prop["enum"] = list(options.keys())

    if not isinstance(prop.get("options"), dict):
        prop["options"] = {}
    prop["options"]["enum_titles"] = [str(v) for v in options.values()]


def build_property(
    param: ParameterDescriptor,
    descriptor: ActionDescriptor,
    owner: Any = None,
) -> dict[str, Any] | None:
    """Property schema for one parameter, or None when it is hidden."""
    prop: dict[str, Any] = {
        "title": camel_to_words(param.name),
        "type": "string",
    }

    override = descriptor.param_overrides.get(param.name)
    if override is not None:
        options = bind(override.provider, owner)() if override.provider is not None else True
        if options is False:
            return None

        apply_editor_fields(prop, override.editor, descriptor.action_id)

        if isinstance(options, (list, tuple)):
            options = dict(enumerate(options))
        if isinstance(options, Mapping):
            apply_enum(prop, options)

    if not param.optional and prop.get("type") == "string" and "minLength" not in prop:
        prop["minLength"] = 1

    return prop


def synthesize_schema(
    descriptor: ActionDescriptor,
    owner: Any = None,
    translate: Translate = no_translation,
) -> dict[str, Any]:
    """Schema document built parameter by parameter."""
    document: dict[str, Any] = {
        "title": translate(TRANSLATION_CATEGORY, DEFAULT_TITLE),
        "type": "object",
        "properties": {},
    }
    required: list[str] = []

    for param in descriptor.parameters:
        prop = build_property(param, descriptor, owner)
        if prop is None:
            continue
        if not param.optional:
            required.append(param.name)
        document["properties"][param.name] = prop

    if required:
        document["required"] = required

    return document


def generate_json(
    descriptor: ActionDescriptor,
    owner: Any = None,
    translate: Translate = no_translation,
) -> str:
    """Synthesized schema document as a JSON string."""
    return dumps(synthesize_schema(descriptor, owner, translate))
