"""Errors raised while declaring entities and join tables."""


class OrmError(Exception):
    pass


class JoinConfigError(OrmError, ValueError):
    pass


class UnresolvedNameError(OrmError):
    """A name needed by a declaration could not be derived."""

    def __init__(self, field):
        super().__init__(
            f"'{field}' is not set and could not be derived. "
            f"Pass it explicitly or configure a decamelizer."
        )
        self.field = field


class UnknownEntityError(OrmError, LookupError):
    pass


class UnknownColumnError(OrmError, LookupError):
    pass


class UnknownRelationshipError(OrmError, LookupError):
    pass
