from .entity_meta import EntityMeta
from .exceptions import OrmError, UnknownColumnError
from .field import Field
from .log import get_logger
from .key_words import get_column_name
from .many_to_many import ManyToMany
from .query import Query
from .relationship import HasMany
from .single_relationship import BelongsTo, single_key

logger = get_logger(__name__)


class Entity(metaclass=EntityMeta):
    """Declarative base for mapped entities.

    Columns are declared as class attributes or through ``add_columns``;
    table name, primary key and relationships through the class methods
    below. Declarations are meant to run once, at import time.
    """

    def __init__(self, **kwargs):
        for f in self._fields.values():
            setattr(self, f.name, kwargs.get(f.name, f.default))

    def __repr__(self):
        return f"<{self.__class__.__name__}({', '.join(map(repr, self.identity()))})>"

    def identity(self):
        """Primary key values, in primary key order."""
        return tuple(getattr(self, name) for name in self._primary_key)

    @classmethod
    def query(cls):
        """Create a new query for this entity.

        Example:
            sql, params = Foo.query().filter(Foo.name == "x").to_sql()
        """
        return Query(cls)

    @classmethod
    def set_table_name(cls, name):
        cls._table_name = name
        logger.debug("entity.table", entity=cls.__name__, table=name)

    @classmethod
    def add_columns(cls, **columns):
        for name, field in columns.items():
            if not isinstance(field, Field):
                raise TypeError(f"Column '{name}' must be a Field, got {type(field).__name__}")
            field.__set_name__(cls, name)
            setattr(cls, name, field)
            cls._fields[name] = field
        logger.debug("entity.columns", entity=cls.__name__, columns=list(columns))

    @classmethod
    def set_primary_key(cls, *columns):
        if not columns:
            raise OrmError(f"{cls.__name__}: primary key needs at least one column")
        missing = [c for c in columns if c not in cls._fields]
        if missing:
            raise UnknownColumnError(
                f"Unknown column(s) {', '.join(missing)} on {cls.__name__}. "
                f"Available: {', '.join(cls._fields)}"
            )

        for name, field in cls._fields.items():
            field.primary_key = name in columns
        cls._primary_key = tuple(columns)
        logger.debug("entity.primary_key", entity=cls.__name__, columns=list(columns))

    @classmethod
    def primary_key(cls):
        return cls._primary_key

    @classmethod
    def relationships(cls):
        return dict(cls._relationships)

    @classmethod
    def _add_relationship(cls, accessor, rel):
        rel.__set_name__(cls, accessor)
        setattr(cls, accessor, rel)
        cls._relationships[accessor] = rel
        logger.debug("entity.relationship", entity=cls.__name__, relationship=repr(rel))
        return rel

    @classmethod
    def belongs_to(cls, accessor, target, foreign_key):
        """Declare that ``foreign_key`` on this entity references ``target``."""
        if foreign_key not in cls._fields:
            raise UnknownColumnError(f"Unknown column '{foreign_key}' on {cls.__name__}")
        return cls._add_relationship(accessor, BelongsTo(target, foreign_key))

    @classmethod
    def has_many(cls, accessor, target, foreign_key):
        """Declare that rows of ``target`` reference this entity via ``foreign_key``."""
        return cls._add_relationship(accessor, HasMany(target, foreign_key))

    @classmethod
    def many_to_many(cls, accessor, link, far):
        """Declare a many-to-many through has-many ``link`` and its belongs-to ``far``."""
        return cls._add_relationship(accessor, ManyToMany(link, far))

    @classmethod
    def create_table_sql(cls):
        """Render the CREATE TABLE statement for this entity."""
        if not cls._table_name:
            raise OrmError(f"{cls.__name__} has no table name")

        fields_sql = []
        constraints_sql = []
        composite = len(cls._primary_key) > 1

        for f in cls._fields.values():
            name = get_column_name(f.name)
            col = f"{name} {f.sql_type()}"
            if f.primary_key and not composite:
                col += " PRIMARY KEY"
                if f.py_type is int:
                    col += " AUTOINCREMENT"
            if not f.nullable:
                col += " NOT NULL"
            if f.default is not None:
                value = int(f.default) if isinstance(f.default, bool) else f.default
                col += f" DEFAULT {value!r}" if isinstance(value, str) else f" DEFAULT {value}"
            fields_sql.append(col)

        if composite:
            keys = ', '.join(get_column_name(c) for c in cls._primary_key)
            constraints_sql.append(f"PRIMARY KEY ({keys})")

        for rel in cls._relationships.values():
            if isinstance(rel, BelongsTo):
                target = rel.resolve()
                constraints_sql.append(
                    f"FOREIGN KEY ({get_column_name(rel.foreign_key)}) "
                    f"REFERENCES {target._table_name}({get_column_name(single_key(target))})"
                )

        return f"CREATE TABLE IF NOT EXISTS {cls._table_name} ({', '.join(fields_sql + constraints_sql)})"
