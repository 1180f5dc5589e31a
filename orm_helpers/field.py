import datetime
from decimal import Decimal

NUMERIC_TYPES = (int, float, Decimal)


class Field:
    def __init__(self, py_type, primary_key=False, nullable=True, default=None, is_numeric=None):
        self.py_type = py_type
        self.primary_key = primary_key
        self.nullable = nullable
        self.default = default
        if is_numeric is None:
            is_numeric = py_type in NUMERIC_TYPES
        self.is_numeric = is_numeric
        self.name = None
        self.entity_cls = None

    def __set_name__(self, owner, name):
        self.name = name
        self.entity_cls = owner

    def __get__(self, obj, owner):
        """Descriptor to return Column for class access, value for instance access."""
        if obj is None:
            # Class access (e.g. FooBar.foo_id) builds queries
            from .query import Column
            return Column(self.name)
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __repr__(self):
        flags = []
        if self.primary_key:
            flags.append("pk")
        if not self.nullable:
            flags.append("not null")
        return f"<Field {self.name}: {self.data_type}{' ' + ', '.join(flags) if flags else ''}>"

    @property
    def data_type(self):
        return self.sql_type().lower()

    def sql_type(self):
        """Map Python type -> SQLite type."""
        type_map = {
            int: "INTEGER",
            float: "REAL",
            str: "TEXT",
            bool: "INTEGER",
            datetime.datetime: "TEXT",
            Decimal: "REAL"
        }
        return type_map.get(self.py_type, "TEXT")
