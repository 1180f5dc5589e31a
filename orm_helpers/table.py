from .join import JoinTable


class table:
    """``@table(name="...")`` sets an entity's table name."""
    def __init__(self, name=''):
        self.name = name

    def __call__(self, cls):
        cls.set_table_name(self.name)
        return cls


class join_table:
    """``@join_table(left_class="Foo", right_class="Bar")`` declares a join table.

    The decorated class must mix in JoinTable.
    """
    def __init__(self, params=None, **options):
        self.params = params
        self.options = options

    def __call__(self, cls):
        if not (isinstance(cls, type) and issubclass(cls, JoinTable)):
            raise TypeError(f"@join_table needs a JoinTable subclass, got {cls!r}")
        cls.join_table(self.params, **self.options)
        return cls
