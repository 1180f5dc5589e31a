from .exceptions import UnknownRelationshipError
from .query import Column
from .relationship import HasMany
from .single_relationship import NEVER, BelongsTo, single_key


def _relationship(entity_cls, name, kind):
    rel = entity_cls._relationships.get(name)
    if not isinstance(rel, kind):
        available = ', '.join(entity_cls._relationships.keys())
        raise UnknownRelationshipError(
            f"{entity_cls.__name__} has no {kind.r_type} relationship '{name}'. "
            f"Available: {available}"
        )
    return rel


class ManyToMany:
    """Bridges a has-many to a join entity and that entity's belongs-to.

    ``Foo.bars`` with ``link='foo_bars'`` and ``far='bar'`` walks
    Foo -> Foo_Bar (via foo_bars) -> Bar (via bar).
    """

    r_type = "many-to-many"

    def __init__(self, link, far):
        self.link = link
        self.far = far
        self.name = None
        self.owner = None

    def __set_name__(self, owner, name):
        self.name = name
        self.owner = owner

    def __repr__(self):
        return f"<{self.r_type} {self.owner.__name__}.{self.name} via {self.link}.{self.far}>"

    def path(self):
        """Return (link relationship, far relationship)."""
        link = _relationship(self.owner, self.link, HasMany)
        far = _relationship(link.resolve(), self.far, BelongsTo)
        return link, far

    def __get__(self, obj, owner):
        if obj is None:
            return self

        link, far = self.path()
        join_cls = link.resolve()
        link._validate(join_cls)
        target = far.resolve()

        pk_value = getattr(obj, single_key(owner))
        if pk_value is None:
            return target.query().filter(NEVER)

        near = Column(link.foreign_key) == pk_value
        return target.query().filter(
            Column(single_key(target)).in_select(far.foreign_key, join_cls._table_name, near)
        )
