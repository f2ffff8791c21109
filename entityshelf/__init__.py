"""Whitelist-based object serialization.

An Entity declares which properties of a model may be exposed and how:
renamed (``as``), conditional (``if``), nested (``using``) or computed
(``value``). Anything an entity does not declare is never emitted, and a
missing entity emits nothing at all.

Pipeline (present):
    Step 1: detect_relations_to_load() - Find nested relations not yet loaded
    Step 2: Model.load() - Host loads them (the only await)
    Step 3: check_relations() - Refuse loaded relations exposed without ``using``
    Step 4: represent() - Apply the rules in declaration order
"""

from .core import (
    EntityConfig,
    EntityError,
    InvalidSpecification,
    UnsafeRelationExposure,
    configure,
    get_config,
    reset_config,
)
from .core.models import (
    OMIT,
    ComputedRule,
    Entity,
    ExposeRule,
    NestedRule,
    Options,
    base_entity,
    define,
    extend,
    parse_rule,
)
from .host import Collection, Model, Record, RelationNotFoundError
from .presenter import present, render, represent, to_json
from .relations import check_relations, detect_relations_to_load

__version__ = "0.1.0"

__all__ = [
    # Entities
    "Entity",
    "ExposeRule",
    "NestedRule",
    "ComputedRule",
    "OMIT",
    "Options",
    "base_entity",
    "define",
    "extend",
    "parse_rule",
    # Entry points
    "represent",
    "present",
    "render",
    "to_json",
    "check_relations",
    "detect_relations_to_load",
    # Host models
    "Model",
    "Collection",
    "Record",
    "RelationNotFoundError",
    # Errors
    "EntityError",
    "InvalidSpecification",
    "UnsafeRelationExposure",
    # Config
    "EntityConfig",
    "configure",
    "get_config",
    "reset_config",
]
