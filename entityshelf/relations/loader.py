"""Detection of relations that must be loaded before presenting."""

from typing import Any

from ..core.models import Entity
from ..host.base import Model, is_collection


def _first(related: Any) -> Any:
    # Nested relations of a to-many relation are detected on its first model
    if is_collection(related):
        return related[0] if len(related) else None
    return related


def detect_relations_to_load(entity: Entity | None, model: Model | None, prefix: str = "") -> list[str]:
    """Dotted paths of nested-entity relations that are not loaded yet.

    A relation is reported when it is not loaded on ``model`` but the model
    can load it, or holds a non-empty attribute of the same name. Below a relation that is not loaded yet, every nested
    relation of the entity is reported too, so a single load call fetches
    the whole tree.

    Args:
        entity: Entity that will be used for representation
        model: Host model, or None below a relation that is not loaded
        prefix: Path prefix for recursion

    Returns:
        Ordered, de-duplicated list of relation paths
    """
    if not entity:
        return []
    if model is not None and not isinstance(model, Model):
        # Plain data has no relations to load
        return []

    relations = []
    for rule in entity.properties:
        if rule.kind != "nested":
            continue

        path = f"{prefix}{rule.key}"
        if model is None:
            relations.append(path)
            related = None
        else:
            loaded = model.relations()
            if rule.key in loaded:
                related = _first(loaded[rule.key])
                if related is None:
                    continue
            elif model.has_relation(rule.key) or model.attributes().get(rule.key):
                relations.append(path)
                related = None
            else:
                continue

        relations.extend(detect_relations_to_load(rule.using, related, f"{path}."))

    return list(dict.fromkeys(relations))
