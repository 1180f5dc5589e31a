"""Shared fixtures for entity declaration tests."""

from __future__ import annotations

import pytest

from orm_helpers import Entity, EntityMeta, Field


@pytest.fixture(autouse=True)
def isolated_registry():
    saved = dict(EntityMeta.registry)
    yield EntityMeta.registry
    EntityMeta.registry.clear()
    EntityMeta.registry.update(saved)


@pytest.fixture
def parents():
    """Foo and Bar entities in the 'myapp' namespace."""

    class Foo(Entity):
        __module__ = "myapp"
        _table_name = "Foo"
        id = Field(int, primary_key=True, nullable=False)
        name = Field(str)

    class Bar(Entity):
        __module__ = "myapp"
        _table_name = "Bar"
        id = Field(int, primary_key=True, nullable=False)

    return Foo, Bar
