"""Host object model contract and an in-memory implementation."""

from .base import Collection, Model, is_collection
from .memory import Record, RelationNotFoundError

__all__ = [
    "Model",
    "Collection",
    "is_collection",
    "Record",
    "RelationNotFoundError",
]
