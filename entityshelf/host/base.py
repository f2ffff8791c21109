"""Abstract host model contract.

The representation engine only needs three things from a host object:
its own attributes, its currently loaded relations, and an async way to
load more relations. Model and Collection add the user-facing
represent/present/to_json entry points on top of that contract.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar

from ..core.config import get_config
from ..core.models import Entity, Options


class Model(ABC):
    """Base class for host objects that can be represented by an Entity.

    Class attributes:
        default_entity: Entity used by to_json()/present() when the options
            do not name one. It is never used for relations; nested entities
            must be given with ``using``.
        entity_safe_mode: Whether represent() runs the relation safety
            check. None defers to EntityConfig.safe_mode.
    """

    default_entity: ClassVar[Entity | None] = None
    entity_safe_mode: ClassVar[bool | None] = None

    @abstractmethod
    def attributes(self) -> dict[str, Any]:
        """Own plain attributes, without relations."""
        ...

    @abstractmethod
    def relations(self) -> dict[str, Any]:
        """Currently loaded relations by name (Model, Collection or list)."""
        ...

    @abstractmethod
    async def load(self, paths: Sequence[str]) -> "Model":
        """Load the given (possibly dotted) relation paths and return self."""
        ...

    def has_relation(self, name: str) -> bool:
        """Whether ``name`` is a relation this object can load.

        Names defined by Model itself are never relations.
        """
        if hasattr(Model, name):
            return False
        return bool(getattr(self, name, None))

    def safety_enabled(self, options: Options) -> bool:
        if options.shallow:
            return False
        if options.safe is not None:
            return options.safe
        if self.entity_safe_mode is not None:
            return self.entity_safe_mode
        return get_config().safe_mode

    def serialize(self, options: Any = None) -> dict[str, Any]:
        """Default host serialization: attributes plus loaded relations.

        Relations are serialized with their own to_json(); ``shallow``
        leaves them out.
        """
        opts = Options.coerce(options)
        data = dict(self.attributes())
        if opts.shallow:
            return data
        for name, related in self.relations().items():
            data[name] = _to_json(related, opts)
        return data

    def represent(self, entity: Entity | None, options: Any = None) -> dict[str, Any] | None:
        """Represent this object with ``entity``; None if no entity is given.

        Raises:
            UnsafeRelationExposure: If a loaded relation is exposed without
                a nested entity and the safety check is enabled
        """
        from ..relations.safety import check_relations
        from ..representation.engine import represent_model

        if not entity:
            return None
        opts = Options.coerce(options)
        if self.safety_enabled(opts):
            check_relations(entity, self)
        return represent_model(entity, self, opts)

    def to_json(self, options: Any = None) -> Any:
        """Serialize with the entity from ``options`` or ``default_entity``.

        Inside a representation (``entity_root`` set) this falls back to the
        host default serialization so nested output is shaped only by the
        enclosing entity's ``using`` rules.
        """
        opts = Options.coerce(options)
        if opts.entity_root:
            return self.serialize(opts)
        entity = opts.resolve_entity(self.default_entity)
        return self.represent(entity, opts.nested())

    async def present(self, options: Any = None) -> dict[str, Any] | None:
        """Load exposed relations that are missing, then represent."""
        from ..presenter import present

        opts = Options.coerce(options)
        return await present(opts.resolve_entity(self.default_entity), self, opts)

    async def render(self, options: Any = None) -> dict[str, Any] | None:
        """Alias for present()."""
        return await self.present(options)


class Collection(Sequence):
    """Ordered sequence of models of one host class."""

    def __init__(self, models: Iterable[Model] = (), model_class: type[Model] | None = None) -> None:
        self.models = list(models)
        self.model_class = model_class

    def __getitem__(self, index):
        return self.models[index]

    def __len__(self) -> int:
        return len(self.models)

    def __repr__(self) -> str:
        return f"Collection({self.models!r})"

    def first(self) -> Model | None:
        return self.models[0] if self.models else None

    @property
    def default_entity(self) -> Entity | None:
        return self.model_class.default_entity if self.model_class else None

    async def load(self, paths: Sequence[str]) -> "Collection":
        """Load ``paths`` on every model, one after the other."""
        for model in self.models:
            await model.load(paths)
        return self

    def serialize(self, options: Any = None) -> list[Any]:
        opts = Options.coerce(options)
        return [model.to_json(opts) for model in self.models]

    def represent(self, entity: Entity | None, options: Any = None) -> list[dict[str, Any]]:
        """Represent every model; empty list if no entity is given."""
        from ..relations.safety import check_relations
        from ..representation.engine import represent_collection

        if not entity:
            return []
        opts = Options.coerce(options)
        for model in self.models:
            if isinstance(model, Model) and model.safety_enabled(opts):
                check_relations(entity, model)
        return represent_collection(entity, self.models, opts)

    def to_json(self, options: Any = None) -> list[Any]:
        opts = Options.coerce(options)
        if opts.entity_root:
            return self.serialize(opts)
        entity = opts.resolve_entity(self.default_entity)
        return self.represent(entity, opts.nested())

    async def present(self, options: Any = None) -> list[dict[str, Any]]:
        from ..presenter import present

        opts = Options.coerce(options)
        return await present(opts.resolve_entity(self.default_entity), self, opts)

    async def render(self, options: Any = None) -> list[dict[str, Any]]:
        """Alias for present()."""
        return await self.present(options)


def is_collection(value: Any) -> bool:
    """Whether ``value`` is a sequence of sources rather than a single one."""
    return isinstance(value, (Collection, list, tuple))


def _to_json(related: Any, options: Options) -> Any:
    if isinstance(related, (Model, Collection)):
        return related.to_json(options)
    if is_collection(related):
        return [_to_json(item, options) for item in related]
    return related
