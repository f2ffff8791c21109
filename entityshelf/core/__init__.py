"""Core models, errors and configuration for entityshelf."""

from .config import EntityConfig, configure, get_config, reset_config
from .errors import EntityError, InvalidSpecification, UnsafeRelationExposure

__all__ = [
    "EntityConfig",
    "configure",
    "get_config",
    "reset_config",
    "EntityError",
    "InvalidSpecification",
    "UnsafeRelationExposure",
]
