# orm_helpers/single_relationship.py
from .entity_meta import EntityMeta
from .exceptions import OrmError
from .query import Condition

# Matches nothing; used for relationships of unsaved rows
NEVER = Condition("1 = 0", [])


def single_key(entity_cls):
    """Name of the entity's single-column primary key."""
    pk = entity_cls._primary_key
    if len(pk) != 1:
        raise OrmError(
            f"{entity_cls.__name__} must have exactly one primary key column, has {pk or 'none'}"
        )
    return pk[0]


class SingleRelationship:
    """Base for relationships whose target is resolved on first access."""

    r_type = None

    def __init__(self, target, foreign_key):
        self.target = target
        self.foreign_key = foreign_key
        self.name = None
        self.owner = None
        self._resolved = None

    def __set_name__(self, owner, name):
        self.name = name
        self.owner = owner

    def resolve(self):
        if self._resolved is None:
            self._resolved = EntityMeta.lookup(self.target)
        return self._resolved

    def __repr__(self):
        return f"<{self.r_type} {self.owner.__name__}.{self.name} -> {self.target} via {self.foreign_key}>"


class BelongsTo(SingleRelationship):
    """Represents a many-to-one relationship (returns a query for one entity)."""

    r_type = "belongs-to"

    def __get__(self, obj, owner):
        if obj is None:
            return self

        target = self.resolve()
        key = single_key(target)
        fk_value = getattr(obj, self.foreign_key)

        if fk_value is None:
            return target.query().filter(NEVER)
        return target.query().filter_by(**{key: fk_value}).limit(1)

    def __set__(self, obj, value):
        """Allow setting the relationship by entity instance."""
        if value is None:
            setattr(obj, self.foreign_key, None)
        else:
            setattr(obj, self.foreign_key, getattr(value, single_key(type(value))))
