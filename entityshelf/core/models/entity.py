"""Entity specifications.

An Entity is an ordered, immutable whitelist of property rules. New
entities are built from existing ones with extend(): overridden keys keep
their position, new keys are appended, keys set to False are removed.

Example:
    >>> address = define(street=True, city=True)
    >>> user = define({"id": True, "name": {"as": "full_name"}, "address": {"using": address}})
    >>> admin = user.extend({"email": True})
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..errors import InvalidSpecification
from .rules import NestedRule, PropertyRule, parse_rule


class Entity(BaseModel):
    """Ordered collection of property rules with unique keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    properties: tuple[PropertyRule, ...] = ()

    @field_validator("properties")
    @classmethod
    def _check_unique_keys(cls, properties):
        seen = set()
        for rule in properties:
            if rule.key in seen:
                raise ValueError(f"Duplicate property key '{rule.key}'")
            seen.add(rule.key)
        return properties

    def keys(self) -> list[str]:
        """Property keys in emission order."""
        return [rule.key for rule in self.properties]

    def get(self, key: str) -> PropertyRule | None:
        for rule in self.properties:
            if rule.key == key:
                return rule
        return None

    def extend(self, overrides: "Mapping[str, Any] | Entity | None" = None, **properties: Any) -> "Entity":
        """Return a new entity with ``overrides`` merged by key."""
        return extend(self, overrides, **properties)

    def represent(self, data: Any, options: Any = None) -> Any:
        """Represent plain data (a mapping or a sequence of mappings)."""
        from ...representation.engine import represent

        return represent(self, data, options)


NestedRule.model_rebuild(_types_namespace={"Entity": Entity})
Entity.model_rebuild()


def _iter_definitions(overrides, properties):
    if isinstance(overrides, Entity):
        for rule in overrides.properties:
            yield rule.key, rule
    elif isinstance(overrides, Mapping):
        yield from overrides.items()
    elif overrides is not None:
        raise InvalidSpecification(
            f"Cannot extend an entity with {type(overrides).__name__}"
        )
    yield from properties.items()


def extend(base: Entity, overrides: Mapping[str, Any] | Entity | None = None, **properties: Any) -> Entity:
    """Merge rule definitions into ``base`` and return a new entity.

    Args:
        base: Entity to start from (left unmodified)
        overrides: Mapping of key -> rule definition, or another Entity
        **properties: Additional key -> rule definitions, applied last

    Returns:
        New Entity

    Raises:
        InvalidSpecification: If a definition cannot be interpreted
    """
    if not isinstance(base, Entity):
        raise InvalidSpecification(f"Cannot extend {type(base).__name__}; expected an Entity")

    rules = {rule.key: rule for rule in base.properties}

    for key, definition in _iter_definitions(overrides, properties):
        rule = parse_rule(key, definition)
        if rule is None:
            rules.pop(key, None)
        else:
            # Dict assignment keeps the position of an existing key
            rules[key] = rule

    try:
        return Entity(properties=tuple(rules.values()))
    except ValidationError as e:
        raise InvalidSpecification(f"Invalid entity: {e}") from e


base_entity = Entity()


def define(definition: Mapping[str, Any] | Entity | None = None, **properties: Any) -> Entity:
    """Build an entity from shorthand rule definitions."""
    return extend(base_entity, definition, **properties)
