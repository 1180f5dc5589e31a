from .key_words import get_column_name


class Condition:
    """Represents a SQL condition with parameters."""
    def __init__(self, sql, params):
        self.sql = sql
        self.params = params

    def __repr__(self):
        return f"<Condition {self.sql} params={self.params}>"


class Column:
    """Represents a database column for query building."""
    def __init__(self, name):
        self.name = get_column_name(name)

    def __eq__(self, other):
        return Condition(f"{self.name} = ?", [other])

    def __ne__(self, other):
        return Condition(f"{self.name} != ?", [other])

    def __lt__(self, other):
        return Condition(f"{self.name} < ?", [other])

    def __le__(self, other):
        return Condition(f"{self.name} <= ?", [other])

    def __gt__(self, other):
        return Condition(f"{self.name} > ?", [other])

    def __ge__(self, other):
        return Condition(f"{self.name} >= ?", [other])

    def in_(self, values):
        """SQL IN operator."""
        if not values:
            return Condition("1 = 0", [])  # Always false
        placeholders = ", ".join("?" * len(values))
        return Condition(f"{self.name} IN ({placeholders})", list(values))

    def in_select(self, column, table, condition):
        """SQL IN against a single-column subquery."""
        return Condition(
            f"{self.name} IN (SELECT {get_column_name(column)} FROM {table} WHERE {condition.sql})",
            list(condition.params),
        )

    def is_null(self):
        return Condition(f"{self.name} IS NULL", [])

    def is_not_null(self):
        return Condition(f"{self.name} IS NOT NULL", [])

    def desc(self):
        """For ORDER BY DESC."""
        return f"{self.name} DESC"

    def asc(self):
        """For ORDER BY ASC."""
        return f"{self.name} ASC"

    def __str__(self):
        return self.name


class Query:
    """SQLAlchemy-style query builder.

    Queries are only rendered, never executed: ``to_sql()`` returns the
    statement and its parameters for whatever driver the caller uses.
    """
    def __init__(self, entity_cls):
        self.entity_cls = entity_cls
        self._filters = []
        self._params = []
        self._order_by = None
        self._limit_val = None

    def filter(self, *conditions):
        """Add filter conditions using comparison operators.

        Example:
            Foo_Bar.query().filter(Foo_Bar.foo_id == 1).to_sql()
        """
        for condition in conditions:
            if isinstance(condition, Condition):
                self._filters.append(condition.sql)
                self._params.extend(condition.params)
            else:
                raise TypeError(f"Expected Condition, got {type(condition)}")
        return self

    def filter_by(self, **kwargs):
        """Simple equality filters using keyword arguments."""
        for k, v in kwargs.items():
            self._filters.append(f"{get_column_name(k)} = ?")
            self._params.append(v)
        return self

    def order_by(self, *fields):
        self._order_by = ", ".join(str(f) for f in fields)
        return self

    def limit(self, n):
        self._limit_val = n
        return self

    def _where(self):
        if self._filters:
            return f" WHERE {' AND '.join(self._filters)}"
        return ""

    def to_sql(self):
        """Return (sql, params) selecting all matching rows."""
        sql = f"SELECT * FROM {self.entity_cls._table_name}{self._where()}"

        if self._order_by:
            sql += f" ORDER BY {self._order_by}"

        if self._limit_val is not None:
            sql += f" LIMIT {self._limit_val}"

        return sql, list(self._params)

    def count_sql(self):
        """Return (sql, params) counting matching rows."""
        sql = f"SELECT COUNT(*) FROM {self.entity_cls._table_name}{self._where()}"
        return sql, list(self._params)

    def __repr__(self):
        sql, params = self.to_sql()
        return f"<Query {sql} params={params}>"
