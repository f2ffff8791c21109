"""In-memory host model.

Record keeps attributes and loaded relations in dicts and loads relations
lazily through per-relation loader callables, which may be sync or async:

    async def fetch_address(user):
        return Record({"street": "1 Main St", "city_id": 3})

    user = Record({"id": 1, "address_id": 7}, loaders={"address": fetch_address})
    await user.load(["address"])
"""

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .base import Collection, Model, is_collection


logger = logging.getLogger(__name__)

Loader = Callable[["Record"], Any]


class RelationNotFoundError(LookupError):
    """Raised when a relation path names a relation that cannot be loaded."""

    def __init__(self, relation: str, path: str) -> None:
        self.relation = relation
        self.path = path
        super().__init__(f"Unknown relation '{relation}' in path '{path}'")


class Record(Model):
    """Dict-backed Model.

    Args:
        attributes: Own plain attributes
        relations: Relations that are already loaded
        loaders: Relation name -> callable(record) returning a Model,
            a Collection, a list of Models or None (or an awaitable of one)
    """

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        relations: Mapping[str, Any] | None = None,
        loaders: Mapping[str, Loader] | None = None,
    ) -> None:
        self._attributes = dict(attributes or {})
        self._relations = dict(relations or {})
        self._loaders = dict(loaders or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"

    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def relations(self) -> dict[str, Any]:
        return dict(self._relations)

    def has_relation(self, name: str) -> bool:
        return name in self._loaders or name in self._relations

    def set_relation(self, name: str, related: Any) -> None:
        self._relations[name] = related

    async def load(self, paths: Sequence[str]) -> "Record":
        """Load relation paths such as ``"address"`` or ``"address.city"``.

        Relations that are already loaded are not fetched again.

        Raises:
            RelationNotFoundError: If a path segment has no loader
        """
        for path in paths:
            await self._load_path(path.split("."), path)
        return self

    async def _load_path(self, segments: list[str], path: str) -> None:
        name, rest = segments[0], segments[1:]

        if name not in self._relations:
            loader = self._loaders.get(name)
            if loader is None:
                raise RelationNotFoundError(name, path)
            logger.debug("Loading relation '%s' on %r", name, self)
            related = loader(self)
            if inspect.isawaitable(related):
                related = await related
            if isinstance(related, list):
                related = Collection(related, model_class=type(related[0]) if related else None)
            self._relations[name] = related

        if not rest:
            return

        related = self._relations[name]
        targets = related if is_collection(related) else [related]
        for target in targets:
            if isinstance(target, Record):
                await target._load_path(rest, path)
