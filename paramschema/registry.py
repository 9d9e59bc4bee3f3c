"""Action registration table for a controller class.

Scans a controller once, at class definition, for convention-named methods:
  - action{Name}               -> ActionDescriptor with its parameters
  - {actionId}ActionParamSchema -> full schema override
  - {actionId}ActionParam{Name} -> per-parameter override + editor fields

Lookups at request time only read the table.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from .annotations import editor_fields
from .errors import MetadataNotFound
from .naming import (
    action_id_from_method,
    action_method_name,
    camelize,
    lcfirst,
    param_method_name,
    schema_method_name,
)

# Not request params even when declared on an action
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class ParameterDescriptor:
    """One declared action parameter."""

    name: str
    optional: bool
    type: str | None = None
    default: Any = inspect.Parameter.empty


@dataclass
class ParamOverride:
    """Per-parameter override: an options provider and editor fields."""

    provider: Any = None
    editor: dict[str, Any] = field(default_factory=dict)


@dataclass
class ActionDescriptor:
    action_id: str
    method_name: str
    parameters: list[ParameterDescriptor]
    schema_override: Any = None
    param_overrides: dict[str, ParamOverride] = field(default_factory=dict)


def unwrap(member: Any) -> Callable:
    """Underlying function of a staticmethod/classmethod, else the member itself."""
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def bind(member: Any, owner: Any = None) -> Callable:
    """Bind a registered member to a controller instance.

    Without an owner, plain functions and staticmethods are called as is.
    """
    if owner is None:
        return unwrap(member)
    if hasattr(member, "__get__"):
        return member.__get__(owner, type(owner))
    return member


def _annotation_name(annotation: Any) -> str | None:
    if annotation is inspect.Parameter.empty:
        return None
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__name__", None) or str(annotation)


def parameters_from_callable(func: Any) -> list[ParameterDescriptor]:
    """Ordered parameter descriptors of an action, without self/cls/*args/**kwargs."""
    sig = inspect.signature(unwrap(func))
    params: list[ParameterDescriptor] = []
    for index, (name, param) in enumerate(sig.parameters.items()):
        if index == 0 and name in ("self", "cls"):
            continue
        if param.kind in _SKIPPED_KINDS:
            continue
        params.append(ParameterDescriptor(
            name=name,
            optional=param.default is not inspect.Parameter.empty,
            type=_annotation_name(param.annotation),
            default=param.default,
        ))
    return params


def _class_members(controller_cls: type) -> dict[str, Any]:
    """Raw class attributes in declaration order, base classes first.

    Subclass definitions replace inherited ones without moving them.
    """
    members: dict[str, Any] = {}
    for klass in reversed(controller_cls.__mro__):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            members[name] = value
    return members


def _is_routine(member: Any) -> bool:
    return callable(unwrap(member))


class ActionRegistry:
    """Mapping from action id to ActionDescriptor, in registration order."""

    def __init__(self) -> None:
        self._actions: dict[str, ActionDescriptor] = {}

    @staticmethod
    def _key(action_id: str) -> str:
        """Table key: the action method name minus its prefix, lower-first."""
        return lcfirst(camelize(action_id))

    def __contains__(self, action_id: str) -> bool:
        return self._key(action_id) in self._actions

    def __iter__(self) -> Iterator[ActionDescriptor]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)

    def action_ids(self) -> list[str]:
        return list(self._actions)

    def register(
        self,
        action_id: str,
        func: Any,
        schema_override: Any = None,
        param_overrides: dict[str, Any] | None = None,
    ) -> ActionDescriptor:
        """Register an action explicitly.

        ``param_overrides`` maps parameter name to its provider; editor
        fields are read from each provider.
        """
        descriptor = ActionDescriptor(
            action_id=action_id,
            method_name=getattr(unwrap(func), "__name__", action_method_name(action_id)),
            parameters=parameters_from_callable(func),
            schema_override=schema_override,
            param_overrides={
                name: ParamOverride(provider=provider, editor=editor_fields(unwrap(provider)))
                for name, provider in (param_overrides or {}).items()
            },
        )
        self._actions[self._key(action_id)] = descriptor
        return descriptor

    def find(self, action_id: str) -> ActionDescriptor | None:
        return self._actions.get(self._key(action_id))

    def get(self, action_id: str) -> ActionDescriptor:
        """Return the descriptor or raise MetadataNotFound."""
        descriptor = self._actions.get(self._key(action_id))
        if descriptor is None:
            raise MetadataNotFound(action_id, action_method_name(action_id))
        return descriptor

    @classmethod
    def from_class(cls, controller_cls: type) -> ActionRegistry:
        """Build the table from convention-named methods on a controller class."""
        registry = cls()
        members = _class_members(controller_cls)
        for method_name, member in members.items():
            action_id = action_id_from_method(method_name)
            if action_id is None or not _is_routine(member):
                continue

            overrides = {}
            for param in parameters_from_callable(member):
                provider = members.get(param_method_name(action_id, param.name))
                if provider is not None and _is_routine(provider):
                    overrides[param.name] = provider

            schema = members.get(schema_method_name(action_id))
            registry.register(
                action_id,
                member,
                schema_override=schema if schema is not None and _is_routine(schema) else None,
                param_overrides=overrides,
            )
        return registry
