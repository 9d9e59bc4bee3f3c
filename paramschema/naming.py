"""Convert routes and parameter names to action ids and convention names.

Naming convention recognised on a controller:
  - action method         -> action{Camel}              e.g. actionDetail
  - full schema override  -> {actionId}ActionParamSchema e.g. detailActionParamSchema
  - per-param override    -> {actionId}ActionParam{Name} e.g. detailActionParamProductId

Examples:
  route "product/detail"          -> action id "detail"
  route "product/product-detail"  -> action id "productDetail"
  route "/product/" (controller)  -> default action id, e.g. "index"
  param "productId"               -> title "Product Id"
"""

from __future__ import annotations

import re

ACTION_PREFIX = "action"
SCHEMA_SUFFIX = "ActionParamSchema"
PARAM_INFIX = "ActionParam"

# Letter/digit runs; anything else separates words
_WORD = re.compile(r"[^\W_]+")

# xY -> x Y, XYz -> X Yz, abc123 -> abc 123
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Za-z\d])(?=[A-Z][a-z])|(?<=[^\W\d_])(?=\d)")


def lcfirst(word: str) -> str:
    """Lowercase the first character only."""
    return word[:1].lower() + word[1:]


def ucfirst(word: str) -> str:
    """Uppercase the first character only."""
    return word[:1].upper() + word[1:]


def camelize(word: str) -> str:
    """Convert 'product-detail' or 'product_detail' to 'ProductDetail'."""
    return "".join(ucfirst(part) for part in _WORD.findall(word))


def camel_to_words(name: str) -> str:
    """Convert 'productId' to 'Product Id'."""
    label = _CAMEL_BOUNDARY.sub(" ", name)
    label = re.sub(r"[-_.]", " ", label)
    label = re.sub(r"\s+", " ", label).strip().lower()
    return " ".join(ucfirst(w) for w in label.split(" ")) if label else ""


def _basename(route: str) -> str:
    """Last path segment of a route, trailing separators ignored."""
    return route.rstrip("/").rsplit("/", 1)[-1]


def action_id_from_route(route: str, unique_id: str, default_action: str) -> str:
    """Resolve the action id a route points at.

    A route naming only the controller resolves to its default action.
    """
    if route.strip("/") == unique_id:
        return lcfirst(default_action)
    return lcfirst(camelize(_basename(route)))


def action_method_name(action_id: str) -> str:
    return ACTION_PREFIX + camelize(action_id)


def action_id_from_method(method_name: str) -> str | None:
    """Inverse of action_method_name: 'actionProductDetail' -> 'productDetail'.

    Returns None for names that do not follow the action convention.
    """
    if not method_name.startswith(ACTION_PREFIX):
        return None
    rest = method_name[len(ACTION_PREFIX):]
    if not rest or not rest[0].isupper():
        return None
    return lcfirst(rest)


def schema_method_name(action_id: str) -> str:
    return action_id + SCHEMA_SUFFIX


def param_method_name(action_id: str, param_name: str) -> str:
    return action_id + PARAM_INFIX + ucfirst(param_name)
