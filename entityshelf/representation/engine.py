"""Representation engine: apply an Entity to a source object or sequence."""

from collections.abc import Iterable
from typing import Any

from ..core.errors import InvalidSpecification
from ..core.models import Entity, Options
from ..host.base import is_collection
from .evaluator import evaluate_rule, snapshot


def _check_entity(entity: Any) -> None:
    if not isinstance(entity, Entity):
        raise InvalidSpecification(f"Expected an Entity, got {type(entity).__name__}")


def represent_model(entity: Entity | None, source: Any, options: Any = None) -> dict[str, Any] | None:
    """Represent a single source object.

    Returns None when no entity is given, so a missing entity never leaks
    the raw object.
    """
    if not entity:
        return None
    _check_entity(entity)
    if source is None:
        return None

    opts = Options.coerce(options).nested()
    attributes, relations = snapshot(source)

    output = {}
    for rule in entity.properties:
        result = evaluate_rule(rule, source, attributes, relations, opts)
        if result is None:
            continue
        key, value = result
        output[key] = value
    return output


def represent_collection(entity: Entity | None, sources: Iterable[Any], options: Any = None) -> list[dict[str, Any]]:
    """Represent every source; empty representations are dropped."""
    if not entity:
        return []
    _check_entity(entity)

    opts = Options.coerce(options)
    results = (represent_model(entity, source, opts) for source in sources)
    return [result for result in results if result]


def represent(entity: Entity | None, data: Any, options: Any = None) -> Any:
    """Represent a single object or a sequence of objects."""
    if is_collection(data):
        return represent_collection(entity, data, options)
    return represent_model(entity, data, options)
