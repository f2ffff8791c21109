"""Representation layer.

Applies property rules, in declaration order, to source objects that are
already loaded. Nothing in this package suspends or performs I/O.
"""

from .engine import represent, represent_collection, represent_model
from .evaluator import evaluate_rule, snapshot

__all__ = [
    "represent",
    "represent_model",
    "represent_collection",
    "evaluate_rule",
    "snapshot",
]
