"""Controller integration: route -> request params JSON Schema.

Usage::

    class ProductController(RequestParamActionMixin, BaseController):
        unique_id = "product"

        def actionDetail(self, productId):
            ...

        def detailActionParamProductId(self):
            return {"1": "Apple", "2": "Pear"}

    ProductController().json_from_action("product/detail")
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import MetadataNotFound
from .naming import action_id_from_route
from .registry import ActionRegistry
from .schema_builder import (
    Translate,
    custom_schema,
    default_json_schema,
    generate_json,
    no_translation,
)

logger = logging.getLogger(__name__)


def json_from_action(
    registry: ActionRegistry,
    route: str,
    unique_id: str = "",
    default_action: str = "index",
    owner: Any = None,
    translate: Translate = no_translation,
    fallback: str | None = None,
) -> str:
    """Request params schema for the action a route points at.

    Never raises: unknown actions and failing override methods produce
    the fallback schema.
    """
    if fallback is None:
        fallback = default_json_schema()

    action_id = action_id_from_route(route, unique_id, default_action)
    try:
        descriptor = registry.get(action_id)
    except MetadataNotFound as e:
        logger.debug("No request params schema for route %r: %s", route, e)
        return fallback

    try:
        schema = custom_schema(descriptor, owner)
        if schema is not None:
            return schema
        return generate_json(descriptor, owner, translate)
    except Exception:
        logger.exception("Failed to build request params schema for action %r", action_id)
        return fallback


class RequestParamActionMixin:
    """Adds json_from_action() to a controller class.

    The action table is built when the subclass is defined; override
    methods added to the class afterwards are not picked up.
    """

    unique_id: str = ""
    default_action: str = "index"

    _param_registry: ActionRegistry

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._param_registry = ActionRegistry.from_class(cls)

    @classmethod
    def param_registry(cls) -> ActionRegistry:
        return cls._param_registry

    def get_unique_id(self) -> str:
        return self.unique_id

    def translate(self, category: str, message: str) -> str:
        return message

    def default_json_schema(self) -> str:
        return default_json_schema()

    def json_from_action(self, route: str) -> str:
        """Request params JSON Schema for a route."""
        return json_from_action(
            self._param_registry,
            route,
            unique_id=self.get_unique_id(),
            default_action=self.default_action,
            owner=self,
            translate=self.translate,
            fallback=self.default_json_schema(),
        )
