"""Exclusion of pages by page type, including subtypes."""

import logging
from typing import FrozenSet, Iterable, List, Optional, Set

from exclude_children.hierarchy.page_node import Page
from exclude_children.hierarchy.type_registry import TypeRegistry
from exclude_children.types import TypeName

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


class TypeExclusionRules(BaseExclusionRules):
    """Exclusion rules matching pages by type.

    Each configured type name is expanded through the type registry into the type
    itself plus all of its registered subtypes. A page is excluded when its type is
    in the expanded set. Names that are not registered still match pages of exactly
    that type.

    Attributes:
        registry (TypeRegistry): Registry used to expand subtypes.
        type_names (List[TypeName]): The configured names, in the order added.

    Example:
        >>> registry = TypeRegistry()
        >>> registry.register("Page")
        >>> registry.register("Gallery", parent="Page")
        >>> registry.register("PhotoGallery", parent="Gallery")
        >>> rules = TypeExclusionRules(registry, ["Gallery"])
        >>> sorted(rules.excluded_types)
        ['Gallery', 'PhotoGallery']
        >>> rules.exclude(Page(id=4, parent_id=1, type_name="PhotoGallery"))
        True
        >>> rules.exclude(Page(id=5, parent_id=1, type_name="Page"))
        False
    """

    def __init__(self, registry: TypeRegistry, type_names: Optional[Iterable[TypeName]] = None) -> None:
        """Initialize type exclusion rules.

        Args:
            registry: Registry used to expand each name into its subtypes.
            type_names: Page type names to exclude. Defaults to none.
        """
        self.registry = registry
        self.type_names: List[TypeName] = []
        self._excluded: Set[TypeName] = set()
        for name in type_names or ():
            self.add_rule(name)

    def add_rule(self, rule: str) -> None:
        """Exclude another page type and its subtypes.

        Args:
            rule: Name of the page type.
        """
        if rule not in self.registry:
            logger.warning("Excluded page type %s is not registered, only exact matches will be excluded", rule)
        self.type_names.append(rule)
        self._excluded |= self.registry.subtypes_of(rule)

    @property
    def excluded_types(self) -> FrozenSet[TypeName]:
        """The expanded set of excluded type names."""
        return frozenset(self._excluded)

    def exclude(self, page: Page) -> bool:
        return page.type_name in self._excluded

    def has_rules(self) -> bool:
        """Check if any page type is excluded."""
        return bool(self._excluded)
