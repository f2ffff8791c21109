"""Per-invocation representation options."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidSpecification
from .entity import Entity


class Options(BaseModel):
    """Context passed unchanged to every rule function and nested entity.

    Recognised fields select the entity (``entity``, ``with``, ``using``) and
    control the relation safety check (``shallow``, ``safe``). ``entityRoot``
    marks calls made from inside a representation. Any other field is a user
    flag, available through get().
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    entity: Entity | None = None
    with_: Entity | None = Field(default=None, alias="with")
    using: Entity | None = None
    shallow: bool = False
    safe: bool | None = None
    entity_root: bool = Field(default=False, alias="entityRoot")

    @classmethod
    def coerce(cls, value: Any) -> "Options":
        """Build Options from None, a mapping or an Options instance.

        Anything that is not a mapping yields empty options.

        Raises:
            InvalidSpecification: If a recognised field has an invalid value
        """
        if isinstance(value, Options):
            return value
        if not isinstance(value, Mapping):
            return cls()
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise InvalidSpecification(f"Invalid options: {e}") from e

    def get(self, name: str, default: Any = None) -> Any:
        """Look up a recognised field or a user flag."""
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name, default)

    def resolve_entity(self, fallback: Entity | None = None) -> Entity | None:
        """First non-empty of ``entity``, ``with``, ``using`` and ``fallback``."""
        return self.entity or self.with_ or self.using or fallback

    def nested(self) -> "Options":
        """Copy of these options flagged as inside a representation."""
        if self.entity_root:
            return self
        return self.model_copy(update={"entity_root": True})
