"""
Join table declarations.

A join table links two entities through a pair of foreign keys::

    class Foo_Bar(JoinTable, Entity):
        pass

    Foo_Bar.join_table(left_class="Foo", right_class="Bar")

is the same as::

    Foo_Bar.set_table_name("Foo_Bar")
    Foo_Bar.add_columns(
        foo_id=Field(int, nullable=False, is_numeric=True),
        bar_id=Field(int, nullable=False, is_numeric=True),
    )
    Foo_Bar.belongs_to("foo", EntityRef("myapp", "Foo"), "foo_id")
    Foo_Bar.belongs_to("bar", EntityRef("myapp", "Bar"), "bar_id")
    Foo_Bar.set_primary_key("foo_id", "bar_id")

Method names default to the decamelized class names and plurals to their
pluralized forms; the namespace defaults to the join entity's own module.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .entity_meta import EntityMeta
from .exceptions import JoinConfigError, UnresolvedNameError
from .field import Field
from .log import get_logger
from .naming import EntityRef, decamelize as default_decamelize, get_namespace_parts
from .naming import pluralize as default_pluralize

logger = get_logger(__name__)

OPTIONAL_NAMES = (
    "left_method",
    "right_method",
    "left_method_plural",
    "right_method_plural",
    "self_method",
    "self_method_plural",
    "namespace",
)


class JoinConfig(BaseModel):
    """Names used to declare one join table.

    Only ``left_class`` and ``right_class`` are required; the rest is
    filled in by ``resolve_defaults``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    left_class: str
    right_class: str
    left_method: Optional[str] = None
    right_method: Optional[str] = None
    left_method_plural: Optional[str] = None
    right_method_plural: Optional[str] = None
    self_method: Optional[str] = None
    self_method_plural: Optional[str] = None
    namespace: Optional[str] = None

    @field_validator("left_class", "right_class")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator(*OPTIONAL_NAMES, mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_params(cls, params=None, **overrides) -> "JoinConfig":
        """Build a config from a mapping, an existing config and/or keywords.

        Keywords take precedence over ``params``.
        """
        if isinstance(params, JoinConfig):
            if not overrides:
                return params
            params = params.model_dump(exclude_none=True)
        elif params is None:
            params = {}
        elif not isinstance(params, Mapping):
            raise JoinConfigError(f"Expected a mapping of join table options, got {type(params).__name__}")

        try:
            return cls(**{**params, **overrides})
        except ValidationError as exc:
            raise JoinConfigError(f"Invalid join table configuration: {exc}") from exc

    def require(self, name: str) -> str:
        value = getattr(self, name)
        if value is None:
            raise UnresolvedNameError(name)
        return value

    def foreign_keys(self) -> tuple[str, str]:
        """('<left_method>_id', '<right_method>_id')"""
        return f"{self.require('left_method')}_id", f"{self.require('right_method')}_id"

    def table_name(self) -> str:
        return f"{self.left_class}_{self.right_class}"

    def left_ref(self) -> EntityRef:
        return EntityRef(self.require("namespace"), self.left_class)

    def right_ref(self) -> EntityRef:
        return EntityRef(self.require("namespace"), self.right_class)


def resolve_defaults(
    config: JoinConfig,
    entity,
    decamelize: Optional[Callable[[str], str]] = default_decamelize,
    pluralize: Callable[[str], str] = default_pluralize,
) -> JoinConfig:
    """Return ``config`` with every absent optional name filled in.

    Explicit values always win. Without ``decamelize`` the method names
    stay unset, and declarations that need them raise UnresolvedNameError.
    """
    derived = {}

    def fill(name, compute):
        current = getattr(config, name)
        if current is None:
            current = compute()
            if current is not None:
                derived[name] = current
        return current

    fill("namespace", lambda: get_namespace_parts(entity)[0])

    methods = {}
    for side, source in (
        ("left_method", config.left_class),
        ("right_method", config.right_class),
        ("self_method", entity.__name__),
    ):
        methods[side] = fill(side, lambda source=source: decamelize(source) if decamelize else None)

    for side, singular in methods.items():
        fill(f"{side}_plural", lambda singular=singular: pluralize(singular) if singular else None)

    if not derived:
        return config
    return config.model_copy(update=derived)


class JoinTable:
    """Class methods that declare an entity as a join table.

    Mix into an Entity subclass. Each method takes the join options as a
    mapping, a JoinConfig or keyword arguments.
    """

    # Derives method names from class names; None disables derivation.
    join_decamelize = staticmethod(default_decamelize)

    @classmethod
    def _join_defaults(cls, params, overrides) -> JoinConfig:
        config = JoinConfig.from_params(params, **overrides)
        return resolve_defaults(config, cls, decamelize=cls.join_decamelize)

    @classmethod
    def join_table(cls, params=None, **overrides) -> JoinConfig:
        """Set the table, add the key columns, relationships and primary key."""
        config = cls._join_defaults(params, overrides)

        cls.set_table(config)
        cls.add_join_columns(config)
        cls.generate_relationships(config)
        cls.generate_primary_key(config)

        logger.debug("join_table.declared", entity=cls.__name__, table=cls._table_name)
        return config

    @classmethod
    def set_table(cls, params=None, **overrides):
        config = JoinConfig.from_params(params, **overrides)
        cls.set_table_name(config.table_name())

    @classmethod
    def add_join_columns(cls, params=None, **overrides):
        config = cls._join_defaults(params, overrides)
        left_id, right_id = config.foreign_keys()

        cls.add_columns(**{
            left_id: Field(int, nullable=False, is_numeric=True),
            right_id: Field(int, nullable=False, is_numeric=True),
        })

    @classmethod
    def generate_relationships(cls, params=None, **overrides):
        config = cls._join_defaults(params, overrides)
        left_id, right_id = config.foreign_keys()

        cls.belongs_to(config.require("left_method"), config.left_ref(), left_id)
        cls.belongs_to(config.require("right_method"), config.right_ref(), right_id)

    @classmethod
    def generate_has_manys(cls, params=None, resolve=None, **overrides):
        config = cls._join_defaults(params, overrides)
        resolve = resolve or EntityMeta.lookup
        left_id, right_id = config.foreign_keys()
        self_method = config.require("self_method")

        resolve(config.left_ref()).has_many(self_method, cls, left_id)
        resolve(config.right_ref()).has_many(self_method, cls, right_id)

    @classmethod
    def generate_many_to_manys(cls, params=None, resolve=None, **overrides):
        config = cls._join_defaults(params, overrides)
        resolve = resolve or EntityMeta.lookup
        self_method = config.require("self_method")

        resolve(config.left_ref()).many_to_many(
            config.require("right_method_plural"), self_method, config.require("right_method"),
        )
        resolve(config.right_ref()).many_to_many(
            config.require("left_method_plural"), self_method, config.require("left_method"),
        )

    @classmethod
    def generate_primary_key(cls, params=None, **overrides):
        config = cls._join_defaults(params, overrides)
        cls.set_primary_key(*config.foreign_keys())
