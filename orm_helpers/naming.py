"""
Name derivation helpers used when declaring join tables.
"""

from typing import NamedTuple

import inflection


class EntityRef(NamedTuple):
    """Reference to an entity by namespace and class name."""
    namespace: str
    name: str

    @classmethod
    def parse(cls, qualified: str) -> "EntityRef":
        """Split a dotted name at its last dot (e.g. 'myapp.models.Foo')."""
        namespace, _, name = qualified.rpartition(".")
        return cls(namespace, name)

    def __str__(self):
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"


def get_namespace_parts(entity_cls) -> tuple[str, str]:
    """Return (namespace, name) for an entity class."""
    return entity_cls.__module__, entity_cls.__name__


def decamelize(name: str) -> str:
    """'FooBar' -> 'foo_bar'"""
    return inflection.underscore(name)


def pluralize(name: str | None, separator: str = "_") -> str | None:
    """Pluralize the last word of a separator-joined name.

    'city_hall' -> 'city_halls', 'user_category' -> 'user_categories'
    """
    if not name:
        return name
    words = name.split(separator)
    words[-1] = inflection.pluralize(words[-1])
    return separator.join(words)
