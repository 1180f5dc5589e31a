from .exceptions import UnknownColumnError
from .single_relationship import NEVER, SingleRelationship, single_key


class HasMany(SingleRelationship):
    """One-to-many: rows of ``target`` whose ``foreign_key`` points at this row."""

    r_type = "has-many"

    def _validate(self, target):
        if self.foreign_key not in target._fields:
            available = ', '.join(target._fields.keys())
            raise UnknownColumnError(
                f"Unknown field '{self.foreign_key}' on {target.__name__}. "
                f"Available: {available}"
            )

    def __get__(self, obj, owner):
        """Return a query builder instead of executing the query."""
        if obj is None:
            return self

        target = self.resolve()
        self._validate(target)  # Fails fast with helpful error

        pk_value = getattr(obj, single_key(owner))
        if pk_value is None:
            return target.query().filter(NEVER)

        fk_column = getattr(target, self.foreign_key)
        return target.query().filter(fk_column == pk_value)
