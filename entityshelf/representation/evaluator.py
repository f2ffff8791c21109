"""Property rule evaluation.

Evaluation order for one rule:
    1. ``if`` predicate - skip the property when it is falsy
    2. value - nested entity, computed value, or attribute lookup
    3. output key - ``as`` if given, else ``key``
"""

from collections.abc import Mapping
from typing import Any

from ..core.errors import InvalidSpecification
from ..core.models import OMIT, Entity, Options
from ..core.models.rules import ComputedRule, ExposeRule, NestedRule
from ..host.base import Model, is_collection


def snapshot(source: Any) -> tuple[Mapping[str, Any], Mapping[str, Any]]:
    """Return the (attributes, loaded relations) of a source object.

    Raises:
        InvalidSpecification: If the source is neither a Model nor a mapping
    """
    if isinstance(source, Model):
        return source.attributes(), source.relations()
    if isinstance(source, Mapping):
        return source, {}
    raise InvalidSpecification(f"Cannot read attributes from {type(source).__name__}")


def _nested_value(rule: NestedRule, attributes, relations, options: Options) -> Any:
    from .engine import represent_model

    if not isinstance(rule.using, Entity):
        raise InvalidSpecification("'using' does not refer to an Entity", key=rule.key)

    if rule.key in relations:
        value = relations[rule.key]
    else:
        value = attributes.get(rule.key, OMIT)

    # Absent relations are dropped, not emitted as empty containers
    if value is OMIT or value is None:
        return OMIT

    if is_collection(value):
        items = (represent_model(rule.using, item, options) for item in value)
        return [item for item in items if item]

    if isinstance(value, (Model, Mapping)):
        return represent_model(rule.using, value, options)

    raise InvalidSpecification(
        f"Cannot represent a {type(value).__name__} value with a nested entity",
        key=rule.key,
    )


def evaluate_rule(
    rule: ExposeRule | NestedRule | ComputedRule,
    source: Any,
    attributes: Mapping[str, Any],
    relations: Mapping[str, Any],
    options: Options,
) -> tuple[str, Any] | None:
    """Evaluate one rule against a source object.

    Args:
        rule: Property rule
        source: Object passed to ``if`` and ``value`` functions
        attributes: Plain attributes of the source
        relations: Loaded relations of the source
        options: Invocation options

    Returns:
        (output_key, value), or None when the property is omitted

    Raises:
        InvalidSpecification: If the rule cannot be evaluated
    """
    if rule.if_ is not None and not rule.if_(source, options):
        return None

    if rule.kind == "nested":
        value = _nested_value(rule, attributes, relations, options)
    elif rule.kind == "computed":
        value = rule.compute(source, options)
    elif rule.kind == "expose":
        value = attributes.get(rule.key, OMIT)
    else:
        raise InvalidSpecification(f"Unknown rule kind {rule.kind!r}", key=rule.key)

    if value is OMIT:
        return None
    return rule.output_key, value
