"""In-memory persistence layer holding draft and live copies of pages."""

import logging
from typing import Dict, Iterator, List

from exclude_children.exceptions import PageNotFoundError, UnknownPageTypeError
from exclude_children.hierarchy.page_node import Page
from exclude_children.hierarchy.type_registry import TypeRegistry
from exclude_children.types import Stage, TypeName, VersionedMode

logger = logging.getLogger(__name__)


class SiteStore:
    """Pages of a site, kept per stage.

    New pages are written to the draft stage and copied to the live stage when
    published. Child listings match on parent id, leave out the parent itself, keep
    only pages sharing the parent's base type and are ordered by ``sort`` and then
    by insertion order.

    Attributes:
        registry (TypeRegistry): Registry used to resolve base types.
        root (Page): Sentinel page with id 0 that top level pages hang from.

    Example:
        >>> registry = TypeRegistry()
        >>> registry.register("Page", versioned=True)
        >>> store = SiteStore(registry, root_type="Page")
        >>> store.write(Page(id=1, parent_id=0, type_name="Page", title="Home"))
        >>> [page.title for page in store.children_of(store.root, Stage.DRAFT)]
        ['Home']
        >>> store.children_of(store.root, Stage.LIVE)
        []
        >>> store.publish(1)
        >>> [page.title for page in store.children_of(store.root, Stage.LIVE)]
        ['Home']
    """

    def __init__(self, registry: TypeRegistry, root_type: TypeName) -> None:
        """Initialize an empty store.

        Args:
            registry: Registry holding every page type stored here.
            root_type: Page type of the sentinel root page.

        Raises:
            UnknownPageTypeError: If ``root_type`` is not registered.
        """
        if root_type not in registry:
            raise UnknownPageTypeError(root_type)
        self.registry = registry
        self.root = Page(id=0, parent_id=0, type_name=root_type, title="Site")
        self._stages: Dict[Stage, Dict[int, Page]] = {Stage.DRAFT: {}, Stage.LIVE: {}}
        self._order: Dict[int, int] = {}

    def write(self, page: Page) -> None:
        """Insert or replace a page in the draft stage.

        Raises:
            UnknownPageTypeError: If the page type is not registered.
            ValueError: If the page uses the id reserved for the root page.
        """
        if page.id == self.root.id:
            raise ValueError(f"Page id {self.root.id} is reserved for the site root")
        if page.type_name not in self.registry:
            raise UnknownPageTypeError(page.type_name)
        self._order.setdefault(page.id, len(self._order))
        self._stages[Stage.DRAFT][page.id] = page

    def publish(self, page_id: int) -> None:
        """Copy the draft version of a page to the live stage."""
        self._stages[Stage.LIVE][page_id] = self.get(page_id, Stage.DRAFT)

    def unpublish(self, page_id: int) -> None:
        """Remove a page from the live stage."""
        self.get(page_id, Stage.LIVE)
        del self._stages[Stage.LIVE][page_id]

    def delete_from_stage(self, page_id: int) -> None:
        """Remove a page from the draft stage, leaving any live copy in place."""
        self.get(page_id, Stage.DRAFT)
        del self._stages[Stage.DRAFT][page_id]

    def get(self, page_id: int, stage: Stage = Stage.DRAFT) -> Page:
        """Get a page by id.

        Raises:
            PageNotFoundError: If no page with that id exists in the stage.
        """
        if page_id == self.root.id:
            return self.root
        try:
            return self._stages[stage][page_id]
        except KeyError:
            raise PageNotFoundError(page_id, stage.value) from None

    def is_published(self, page_id: int) -> bool:
        return page_id in self._stages[Stage.LIVE]

    def pages(self, stage: Stage = Stage.DRAFT) -> Iterator[Page]:
        """Iterate over all pages of a stage, in insertion order."""
        yield from sorted(self._stages[stage].values(), key=lambda page: self._order[page.id])

    def children_of(
        self,
        node: Page,
        stage: Stage,
        show_all: bool = True,
        mode: VersionedMode = VersionedMode.STAGE,
    ) -> List[Page]:
        """List the direct children of a page in one stage.

        Args:
            node: The parent page.
            stage: Stage to read children from.
            show_all: Include children hidden from menus. Defaults to True.
            mode: With ``STAGE_UNIQUE``, only children that are missing from the draft
                stage are listed. Defaults to ``STAGE``.

        Returns:
            A new list of child pages. The store itself is never modified.
        """
        base_type = self.registry.base_type_of(node.type_name)
        draft = self._stages[Stage.DRAFT]

        children = []
        for page in self._stages[stage].values():
            if page.parent_id != node.id or page.id == node.id:
                continue
            if self.registry.base_type_of(page.type_name) != base_type:
                continue
            if not show_all and not page.show_in_menus:
                continue
            if mode == VersionedMode.STAGE_UNIQUE and page.id in draft:
                continue
            children.append(page)

        children.sort(key=lambda page: (page.sort, self._order[page.id]))
        logger.debug(
            "children_of(%s, %s, show_all=%s, mode=%s): %d page(s)",
            node.id,
            stage.value,
            show_all,
            mode.value,
            len(children),
        )
        return children
