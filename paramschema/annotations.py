"""Editor annotations for per-parameter override methods.

Two sources, merged at registration time:
- ``@editor(title="My Title")`` decorator: a structured mapping
- ``@editor <key> <value>`` lines in the method docstring

Decorator values win over docstring lines for the same key.
"""

from __future__ import annotations

import inspect
import json
import re
from typing import Any, Callable

from .errors import AnnotationParseError

EDITOR_ATTR = "__editor__"

# @editor description My custom description
_DOC_TAG = re.compile(r"^[ \t]*\*?[ \t]*@editor[ \t]+([a-zA-Z_-]+)[ \t]+(.*?)[ \t]*$", re.MULTILINE)

# {...} or [...]
_LOOKS_LIKE_JSON = re.compile(r"^(\{.+\}|\[.+\])$", re.DOTALL)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def editor(**fields: Any) -> Callable:
    """Attach editor schema fields to a per-parameter override method.

    Usage::

        @editor(title="Product", description="Pick one")
        def detailActionParamProductId(self):
            return {1: "Apple", 2: "Pear"}
    """
    def decorate(func: Callable) -> Callable:
        existing = dict(getattr(func, EDITOR_ATTR, {}))
        existing.update(fields)
        setattr(func, EDITOR_ATTR, existing)
        return func
    return decorate


def parse_doc_tags(doc: str | None) -> dict[str, str]:
    """Collect raw ``@editor <key> <value>`` pairs from a docstring."""
    if not doc:
        return {}
    return {key: value for key, value in _DOC_TAG.findall(doc)}


def parse_editor_value(key: str, value: Any, strict: bool = False) -> Any:
    """Decode a string editor value that looks like a JSON object or array.

    Non-string values pass through. With ``strict`` a malformed JSON value
    raises AnnotationParseError, otherwise the trimmed string is returned.
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not _LOOKS_LIKE_JSON.match(value):
        return value
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError as e:
        if strict:
            raise AnnotationParseError(key, value, str(e)) from e
        return value


def editor_fields(func: Callable) -> dict[str, Any]:
    """Merged, unparsed editor fields declared on a function."""
    fields: dict[str, Any] = dict(parse_doc_tags(inspect.getdoc(func)))
    fields.update(getattr(func, EDITOR_ATTR, {}))
    return fields
