"""Shared controller fixtures for paramschema tests.

ProductController exercises every override path; BareController has
actions but no overrides.
"""

from __future__ import annotations

import json

import pytest

from paramschema.annotations import editor
from paramschema.controller import RequestParamActionMixin


class BaseController:
    """Stand-in for a host framework controller base class."""

    def __init__(self, config: dict | None = None) -> None:
        self.config = config or {}


class ProductController(RequestParamActionMixin, BaseController):
    unique_id = "product"
    default_action = "Index"

    def actionIndex(self, page=1):
        pass

    def actionDetail(self, productId: str):
        pass

    def actionList(self, categoryId, colorId, internalNote, sort="name", limit=20):
        pass

    def listActionParamCategoryId(self):
        return {1: "Fruit", 2: "Vegetables"}

    @editor(description="Pick a color", title="Colour")
    def listActionParamColorId(self):
        """Options for the color select.

        @editor type integer
        @editor title Color
        """
        return {"1": "Red", "2": "Blue"}

    def listActionParamInternalNote(self):
        return False

    def listActionParamSort(self):
        """
        @editor options {"grid_columns": 4}
        @editor default name
        """
        return {"name": "Name", "price": "Price"}

    def actionSearch(self, query, filters=None):
        pass

    def searchActionParamSchema(self, parameters):
        return {
            "title": "Search",
            "type": "object",
            "properties": {p.name: {"type": "string"} for p in parameters},
        }

    def actionRaw(self, q):
        pass

    def rawActionParamSchema(self, parameters):
        return '{"title": "Raw", "type": "object"}'

    def actionBroken(self, q):
        pass

    def brokenActionParamSchema(self, parameters):
        return "{not json"

    def actionUnsupported(self, q):
        pass

    def unsupportedActionParamSchema(self, parameters):
        return 42

    def actionProductDetail(self, slug, *args, **kwargs):
        pass

    def actionFailing(self, q):
        pass

    def failingActionParamQ(self):
        raise RuntimeError("database unavailable")

    def actionAnnotated(self, mode, tags):
        pass

    def annotatedActionParamMode(self):
        """
        @editor minLength 3
        @editor description How to run
        """
        return True

    def annotatedActionParamTags(self):
        """
        @editor items [1, 2,]
        """
        return None


class BareController(RequestParamActionMixin, BaseController):
    unique_id = "site"

    def actionIndex(self):
        pass

    def actionContact(self, name, email, subject="", copyMe=False):
        pass


@pytest.fixture
def product():
    return ProductController()


@pytest.fixture
def bare():
    return BareController()


@pytest.fixture
def schema_of(product):
    """Parsed schema for a route on ProductController."""
    def _schema_of(route: str) -> dict:
        return json.loads(product.json_from_action(route))
    return _schema_of
