"""Relation safety check.

A loaded relation that shares its name with an exposed property must be
represented through a nested entity. Anything else would let the host's
default serialization dump the whole relation.
"""

from typing import Any

from ..core.errors import InvalidSpecification, UnsafeRelationExposure
from ..core.models import Entity
from ..host.base import Model, is_collection


def check_relations(entity: Entity, model: Any) -> None:
    """Recursively verify that exposed loaded relations use nested entities.

    Loaded relations the entity does not mention are ignored; they are never
    exposed.

    Args:
        entity: Entity the model will be represented with
        model: Host model (anything that is not a Model has no relations)

    Raises:
        UnsafeRelationExposure: Naming the first offending relation
        InvalidSpecification: If ``entity`` is not an Entity
    """
    if not isinstance(entity, Entity):
        raise InvalidSpecification(f"Expected an Entity, got {type(entity).__name__}")
    if not isinstance(model, Model):
        return

    for relation, related in model.relations().items():
        rule = entity.get(relation)
        if rule is None:
            continue
        if rule.kind != "nested":
            raise UnsafeRelationExposure(relation)

        if is_collection(related):
            for item in related:
                check_relations(rule.using, item)
        else:
            check_relations(rule.using, related)
