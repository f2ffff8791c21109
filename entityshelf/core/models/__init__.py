"""Data models for entityshelf.

This package contains the pydantic models used across the system:
- rules.py: Property rule variants and shorthand parsing
- entity.py: Entity specifications and extension
- options.py: Per-invocation options
"""

from .rules import (
    OMIT,
    ExposeRule,
    NestedRule,
    ComputedRule,
    PropertyRule,
    parse_rule,
)
from .entity import (
    Entity,
    base_entity,
    define,
    extend,
)
from .options import Options

__all__ = [
    # Rules
    "OMIT",
    "ExposeRule",
    "NestedRule",
    "ComputedRule",
    "PropertyRule",
    "parse_rule",
    # Entity
    "Entity",
    "base_entity",
    "define",
    "extend",
    # Options
    "Options",
]
