"""Static registry of page types and their inheritance hierarchy.

The registry replaces runtime class introspection: page types are registered once
at startup by name, each under an optional parent type, and are then queried by
name for their subtypes, their base type and their declared capabilities.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Set

from anytree import Node, RenderTree
from anytree.render import ContStyle

from exclude_children.config import EXCLUDED_CHILDREN, Config
from exclude_children.exceptions import ConfigurationError, UnknownPageTypeError
from exclude_children.hierarchy.page_type_node import PageTypeNode
from exclude_children.types import TypeName

logger = logging.getLogger(__name__)


class TypeRegistry:
    """A tree of registered page types.

    Capabilities (versioning, the show-in-menus flag) are inherited: a type has a
    capability if it or any of its ancestors declares it.

    Attributes:
        config (Config): Per-type configuration, with inheritance resolved through
            this registry.

    Example:
        >>> registry = TypeRegistry()
        >>> registry.register("Page", versioned=True)
        >>> registry.register("Article", parent="Page")
        >>> registry.register("Gallery", parent="Page")
        >>> registry.register("PhotoGallery", parent="Gallery")
        >>> sorted(registry.subtypes_of("Gallery"))
        ['Gallery', 'PhotoGallery']
        >>> registry.base_type_of("PhotoGallery")
        'Page'
        >>> registry.supports_versioning("Article")
        True
    """

    def __init__(self) -> None:
        self._root = Node("<types>")
        self._types: Dict[TypeName, PageTypeNode] = {}
        self.config = Config(self)

    def register(
        self,
        name: TypeName,
        parent: Optional[TypeName] = None,
        versioned: bool = False,
        show_in_menus_field: bool = True,
        excluded_children: Optional[Sequence[TypeName]] = None,
    ) -> None:
        """Register a page type.

        Args:
            name: Name of the new type.
            parent: Name of an already registered parent type, or None for a base type.
            versioned: Whether the type keeps separate draft and live copies.
            show_in_menus_field: Whether the type declares the show-in-menus flag.
            excluded_children: Static ``excluded_children`` declaration for the type.

        Raises:
            ConfigurationError: If the name is already registered, the parent is unknown or
                ``excluded_children`` is not a list of type names.
        """
        if name in self._types:
            raise ConfigurationError(f"Page type '{name}' is already registered")
        if parent is not None and parent not in self._types:
            raise ConfigurationError(f"Parent type '{parent}' of '{name}' is not registered")
        if excluded_children is not None:
            self.config.declare(name, EXCLUDED_CHILDREN, excluded_children)

        parent_node = self._types[parent] if parent is not None else self._root
        self._types[name] = PageTypeNode(
            name, parent=parent_node, versioned=versioned, show_in_menus_field=show_in_menus_field
        )
        logger.debug("Registered page type %s (parent: %s)", name, parent)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[TypeName]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def _node(self, name: TypeName) -> PageTypeNode:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownPageTypeError(name) from None

    def subtypes_of(self, name: TypeName) -> Set[TypeName]:
        """Get a type together with all of its registered subtypes.

        Unknown names are not an error: they expand to just themselves.
        """
        if name not in self._types:
            return {name}
        return {name} | {node.name for node in self._types[name].descendants}

    def ancestry(self, name: TypeName) -> List[TypeName]:
        """Get the chain of types from the base type down to ``name``, inclusive."""
        return [node.name for node in self._node(name).path[1:]]

    def base_type_of(self, name: TypeName) -> TypeName:
        """Get the topmost registered ancestor of a type."""
        return self.ancestry(name)[0]

    def supports_versioning(self, name: TypeName) -> bool:
        return any(node.versioned for node in self._node(name).path[1:])

    def has_show_in_menus(self, name: TypeName) -> bool:
        return any(node.show_in_menus_field for node in self._node(name).path[1:])

    def render(self) -> str:
        """Render the type hierarchy, one type per line."""
        lines = []
        for pre, _, node in RenderTree(self._root, style=ContStyle()):
            if node is self._root:
                continue
            flags = " (versioned)" if node.versioned else ""
            lines.append(f"{pre[4:]}{node.name}{flags}")
        return "\n".join(lines)
