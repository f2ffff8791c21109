"""Property rule models.

A property rule describes one whitelisted property of an entity. Rules are a
closed tagged union discriminated on ``kind``:

- ExposeRule: copy an attribute, optionally renamed (``as``)
- NestedRule: represent a relation with a nested entity (``using``)
- ComputedRule: emit the result of a function or a constant (``value``)

Every variant may carry an ``if`` predicate and an ``as`` output name.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Annotated, Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidSpecification

if TYPE_CHECKING:
    from .entity import Entity


logger = logging.getLogger(__name__)

# Predicate signature: (source, options) -> bool
Condition = Callable[[Any, Any], Any]


class _Omit:
    """Marker for a property that must not appear in the output."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OMIT"

    def __bool__(self) -> bool:
        return False


OMIT = _Omit()

_RULE_OPTIONS = ("as", "if", "using", "value")


class _BaseRule(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    key: str = Field(min_length=1)
    as_: str | None = Field(default=None, alias="as", min_length=1)
    if_: Condition | None = Field(default=None, alias="if")

    @property
    def output_key(self) -> str:
        """Name the property is emitted under."""
        return self.as_ or self.key


class ExposeRule(_BaseRule):
    """Expose the source attribute ``key``, optionally renamed."""

    kind: Literal["expose"] = "expose"


class NestedRule(_BaseRule):
    """Represent the relation ``key`` with the nested entity ``using``."""

    kind: Literal["nested"] = "nested"
    using: "Entity"

    @field_validator("using", mode="before")
    @classmethod
    def _require_entity(cls, value):
        from .entity import Entity

        if not isinstance(value, Entity):
            raise ValueError(f"'using' must be an Entity, got {type(value).__name__}")
        return value


class ComputedRule(_BaseRule):
    """Emit ``value(source, options)``, or ``value`` itself if not callable."""

    kind: Literal["computed"] = "computed"
    value: Any = None

    def compute(self, source: Any, options: Any) -> Any:
        if callable(self.value):
            return self.value(source, options)
        return self.value


PropertyRule = Annotated[
    Union[ExposeRule, NestedRule, ComputedRule],
    Field(discriminator="kind"),
]

RULE_TYPES = (ExposeRule, NestedRule, ComputedRule)


def parse_rule(key: str, definition: Any) -> ExposeRule | NestedRule | ComputedRule | None:
    """Build a property rule from its shorthand definition.

    Args:
        key: Property key on the source object
        definition: ``True``, ``False``/``None``, a mapping with any of
            ``as``, ``if``, ``using`` and ``value``, or a built rule

    Returns:
        The rule, or None when the definition does not expose the property

    Raises:
        InvalidSpecification: If the definition cannot be interpreted
    """
    if definition is True:
        return ExposeRule(key=key)

    if definition is False or definition is None:
        return None

    if isinstance(definition, RULE_TYPES):
        if definition.key != key:
            return definition.model_copy(update={"key": key})
        return definition

    if not isinstance(definition, Mapping):
        raise InvalidSpecification(
            f"Unsupported rule definition of type {type(definition).__name__}", key=key
        )

    unknown = [name for name in definition if name not in _RULE_OPTIONS]
    if unknown:
        raise InvalidSpecification(f"Unknown rule options: {', '.join(map(str, unknown))}", key=key)

    payload = {"key": key, **definition}

    if "using" in payload:
        if "value" in payload:
            logger.warning(
                "Property '%s' defines both 'using' and 'value'; 'value' is ignored", key
            )
            payload.pop("value")
        rule_type = NestedRule
    elif "value" in payload:
        rule_type = ComputedRule
    else:
        rule_type = ExposeRule

    try:
        return rule_type.model_validate(payload)
    except ValidationError as e:
        raise InvalidSpecification(f"Invalid rule definition: {e}", key=key) from e
