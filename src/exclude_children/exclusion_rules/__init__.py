"""Exclusion rules for filtering child pages."""

from .base_rules import BaseExclusionRules
from .type_rules import TypeExclusionRules

__all__ = [
    "BaseExclusionRules",
    "TypeExclusionRules",
]
