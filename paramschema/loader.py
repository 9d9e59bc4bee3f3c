"""Load a controller class from a 'package.module:ClassName' reference."""

from __future__ import annotations

import importlib

from .controller import RequestParamActionMixin


def load_controller(target: str) -> type[RequestParamActionMixin]:
    """Import and return the controller class named by target."""
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"expected 'module:ClassName', got {target!r}")

    module = importlib.import_module(module_name)
    controller_cls = module
    for part in class_name.split("."):
        controller_cls = getattr(controller_cls, part)

    if not isinstance(controller_cls, type) or not issubclass(controller_cls, RequestParamActionMixin):
        raise TypeError(f"{target} is not a RequestParamActionMixin controller")
    return controller_cls


def action_routes(controller_cls: type[RequestParamActionMixin]) -> list[str]:
    """One 'uniqueId/actionId' route per registered action."""
    prefix = controller_cls.unique_id.strip("/")
    routes = []
    for action_id in controller_cls.param_registry().action_ids():
        routes.append(f"{prefix}/{action_id}" if prefix else action_id)
    return routes
