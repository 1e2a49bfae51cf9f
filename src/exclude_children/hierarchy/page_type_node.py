"""Node representation for page types in the type registry tree."""

from typing import Any, Optional

from anytree import Node


class PageTypeNode(Node):  # type: ignore
    """Node class representing a registered page type.

    Extends anytree.Node to add the capabilities a page type declares. Subtypes are
    the node's descendants, so the type hierarchy can be walked with the usual
    anytree traversal tools.

    Attributes:
        name (str): The page type name.
        parent (Optional[PageTypeNode]): The parent type, or the registry root.
        versioned (bool): True if the type itself declares draft/live versioning.
        show_in_menus_field (bool): True if the type itself declares the show-in-menus flag.

    Example:
        >>> page = PageTypeNode("Page", versioned=True)
        >>> article = PageTypeNode("Article", parent=page)
        >>> article.versioned
        False
        >>> [node.name for node in page.descendants]
        ['Article']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["PageTypeNode"] = None,
        versioned: bool = False,
        show_in_menus_field: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a PageTypeNode.

        Args:
            name: The page type name.
            parent: The parent type node. Defaults to None.
            versioned: Whether this type declares versioning. Defaults to False.
            show_in_menus_field: Whether this type declares the show-in-menus flag.
                Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.versioned = versioned
        self.show_in_menus_field = show_in_menus_field
