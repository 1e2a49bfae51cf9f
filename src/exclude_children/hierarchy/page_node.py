"""Page record stored by the site store."""

from dataclasses import dataclass

from exclude_children.types import TypeName


@dataclass(frozen=True)
class Page:
    """A single page in the site hierarchy.

    Pages are immutable records; the store keeps one record per stage. Top level
    pages have ``parent_id`` 0, which is the id of the store's root page.

    Attributes:
        id (int): Unique page identifier.
        parent_id (int): Identifier of the parent page, 0 for top level pages.
        type_name (TypeName): Name of the registered page type.
        title (str): Page title shown in the tree.
        show_in_menus (bool): Whether the page is shown in navigation.
        sort (int): Position among siblings, lower first.

    Example:
        >>> page = Page(id=3, parent_id=1, type_name="Article", title="News")
        >>> page.show_in_menus
        True
        >>> page.is_top_level
        False
    """

    id: int
    parent_id: int
    type_name: TypeName
    title: str = ""
    show_in_menus: bool = True
    sort: int = 0

    @property
    def is_top_level(self) -> bool:
        return self.parent_id == 0

    @property
    def label(self) -> str:
        """Text used for the page when rendering a tree."""
        return f"{self.title or f'#{self.id}'} [{self.type_name}]"
