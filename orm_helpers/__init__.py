# orm_helpers/__init__.py

from .entity import Entity
from .entity_meta import EntityMeta
from .exceptions import (
    JoinConfigError,
    OrmError,
    UnknownColumnError,
    UnknownEntityError,
    UnknownRelationshipError,
    UnresolvedNameError,
)
from .field import Field
from .join import JoinConfig, JoinTable, resolve_defaults
from .key_words import get_column_name
from .naming import EntityRef, decamelize, get_namespace_parts, pluralize
from .query import Query, Column, Condition
from .table import join_table, table

__all__ = [
    'Entity',
    'EntityMeta',
    'EntityRef',
    'Field',
    'JoinConfig',
    'JoinConfigError',
    'JoinTable',
    'OrmError',
    'Query',
    'Column',
    'Condition',
    'UnknownColumnError',
    'UnknownEntityError',
    'UnknownRelationshipError',
    'UnresolvedNameError',
    'decamelize',
    'get_column_name',
    'get_namespace_parts',
    'join_table',
    'pluralize',
    'resolve_defaults',
    'table',
]
