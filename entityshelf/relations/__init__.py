"""Relation handling: safety checks and auto-load detection."""

from .loader import detect_relations_to_load
from .safety import check_relations

__all__ = [
    "check_relations",
    "detect_relations_to_load",
]
