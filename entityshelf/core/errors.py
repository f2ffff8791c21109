"""Error taxonomy for entityshelf.

All errors raised by the representation engine derive from EntityError.
Errors from host loaders and from user-supplied ``if``/``value`` functions
are never wrapped.
"""


class EntityError(Exception):
    """Base class for entity errors."""


class UnsafeRelationExposure(EntityError):
    """A loaded relation is exposed without a nested entity.

    Args:
        relation: Name of the offending relation.
    """

    def __init__(self, relation: str) -> None:
        self.relation = relation
        super().__init__(
            f'Entity has an exposed relation "{relation}" that does not have '
            f'a "using" option specified!'
        )


class InvalidSpecification(EntityError):
    """A rule, entity or options object cannot be interpreted.

    Args:
        message: Human readable description.
        key: Property key the problem was found on, if any.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        if key is not None:
            message = f"{message} (property '{key}')"
        super().__init__(message)
