"""Public entry points.

Control flow for present():
    detect_relations_to_load() -> host load() -> check_relations() -> represent

represent() and to_json() are synchronous and work on already loaded data.
present() is the only operation that suspends, while the host loads
relations; host load errors propagate unchanged.
"""

import logging
from typing import Any

from .core.config import get_config
from .core.models import Entity, Options
from .host.base import Collection, Model, is_collection
from .relations import detect_relations_to_load
from .representation import engine


logger = logging.getLogger(__name__)


def _as_collection(source: Any) -> Any:
    if is_collection(source) and not isinstance(source, Collection):
        return Collection(source)
    return source


def represent(entity: Entity | None, source: Any, options: Any = None) -> Any:
    """Represent a model, a collection, or plain data with ``entity``.

    Host models get the relation safety check; plain data does not have
    relations.

    Returns:
        A dict (None without entity) for a single object, a list (empty
        without entity) for a sequence
    """
    source = _as_collection(source)
    if isinstance(source, (Model, Collection)):
        return source.represent(entity, options)
    return engine.represent(entity, source, options)


async def present(entity: Entity | None, source: Any, options: Any = None) -> Any:
    """Load missing exposed relations, then represent.

    The relation safety check runs after loading, exactly as in represent().
    """
    opts = Options.coerce(options)
    source = _as_collection(source)
    collection = isinstance(source, Collection)

    if not entity or source is None or (collection and not len(source)):
        return [] if collection else None

    if get_config().auto_load:
        first = source.first() if collection else source
        relations = detect_relations_to_load(entity, first) if isinstance(first, Model) else []
        if relations:
            logger.debug("Loading relations before presenting: %s", ", ".join(relations))
            source = await source.load(relations)

    return represent(entity, source, opts)


async def render(entity: Entity | None, source: Any, options: Any = None) -> Any:
    """Alias for present()."""
    return await present(entity, source, options)


def to_json(source: Any, options: Any = None) -> Any:
    """Default serialization hook.

    Uses the entity named in ``options``, then the model's
    ``default_entity``, and exposes nothing if neither is set.
    """
    source = _as_collection(source)
    if isinstance(source, (Model, Collection)):
        return source.to_json(options)
    opts = Options.coerce(options)
    return engine.represent(opts.resolve_entity(), source, opts.nested())
