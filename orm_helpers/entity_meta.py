import copy

from .exceptions import UnknownEntityError
from .field import Field
from .log import get_logger
from .naming import EntityRef, get_namespace_parts

logger = get_logger(__name__)


class EntityMeta(type):
    registry = {}

    def __new__(meta, name, bases, attrs):
        fields = {}

        for base in reversed(bases):
            for key, val in getattr(base, "_fields", {}).items():
                # Each class owns its fields; primary key flags are per class
                if key not in attrs:
                    attrs[key] = fields[key] = copy.copy(val)

        for key, val in list(attrs.items()):
            if isinstance(val, Field):
                fields[key] = val

        attrs["_fields"] = fields
        attrs["_relationships"] = {}
        attrs.setdefault("_table_name", None)

        cls = super().__new__(meta, name, bases, attrs)

        cls._primary_key = tuple(n for n, f in fields.items() if f.primary_key)

        # Only subclasses of Entity are entities
        if any(isinstance(base, EntityMeta) for base in bases):
            ref = EntityRef(*get_namespace_parts(cls))
            if ref in EntityMeta.registry:
                logger.warning("entity.replaced", entity=str(ref))
            EntityMeta.registry[ref] = cls

        return cls

    @classmethod
    def lookup(meta, target):
        """Resolve an EntityRef, dotted name or entity class to its class."""
        if isinstance(target, EntityMeta):
            return target
        if isinstance(target, str):
            target = EntityRef.parse(target)
        if not isinstance(target, EntityRef):
            raise TypeError(f"Invalid entity reference: {target!r}")

        try:
            return EntityMeta.registry[target]
        except KeyError:
            available = ', '.join(sorted(str(ref) for ref in EntityMeta.registry))
            raise UnknownEntityError(
                f"Unknown entity '{target}'. Available: {available}"
            ) from None
