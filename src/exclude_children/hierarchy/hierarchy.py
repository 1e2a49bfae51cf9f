"""Base child listing for pages, as the admin page tree consumes it."""

import logging
from typing import Callable, List

from exclude_children.exceptions import CapabilityMissingError
from exclude_children.hierarchy.page_node import Page
from exclude_children.hierarchy.site_store import SiteStore
from exclude_children.hierarchy.type_registry import TypeRegistry
from exclude_children.types import Stage, VersionedMode

logger = logging.getLogger(__name__)

# hook(node, children, show_all) -> children
StageChildrenAugmenter = Callable[[Page, List[Page], bool], List[Page]]


class Hierarchy:
    """Lists the draft and live children of pages held in a SiteStore.

    Other components can change the draft listing by registering augmenters, which
    receive the parent page, the candidate children and the ``show_all`` flag and
    return the children to use instead.

    Attributes:
        store (SiteStore): The persistence layer children are read from.

    Example:
        >>> registry = TypeRegistry()
        >>> registry.register("Page", versioned=True)
        >>> store = SiteStore(registry, root_type="Page")
        >>> store.write(Page(id=1, parent_id=0, type_name="Page", title="Home"))
        >>> store.write(Page(id=2, parent_id=0, type_name="Page", title="Hidden", show_in_menus=False))
        >>> hierarchy = Hierarchy(store)
        >>> [page.title for page in hierarchy.stage_children(store.root)]
        ['Home']
        >>> [page.title for page in hierarchy.stage_children(store.root, show_all=True)]
        ['Home', 'Hidden']
    """

    def __init__(self, store: SiteStore) -> None:
        self.store = store
        self._augmenters: List[StageChildrenAugmenter] = []

    @property
    def registry(self) -> TypeRegistry:
        return self.store.registry

    def add_augmenter(self, hook: StageChildrenAugmenter) -> None:
        """Register a hook that may change the draft children of a page."""
        self._augmenters.append(hook)

    def stage_children(self, node: Page, show_all: bool = False) -> List[Page]:
        """Get the children of a page from the draft stage.

        Args:
            node: The parent page.
            show_all: Include children that are not shown in menus. Only has an effect
                when the parent's type declares the show-in-menus flag.

        Returns:
            The children, after every registered augmenter has run.
        """
        only_in_menus = not show_all and self.registry.has_show_in_menus(node.type_name)
        children = self.store.children_of(node, Stage.DRAFT, show_all=not only_in_menus)
        for hook in self._augmenters:
            children = hook(node, children, show_all)
        return children

    def live_children(self, node: Page, show_all: bool = False, only_deleted_from_stage: bool = False) -> List[Page]:
        """Get the children of a page from the live stage.

        Args:
            node: The parent page.
            show_all: Include children that are not shown in menus.
            only_deleted_from_stage: Only list children that were deleted from the
                draft stage but are still live.

        Returns:
            The live children.

        Raises:
            CapabilityMissingError: If the parent's type is not versioned.
        """
        if not self.registry.supports_versioning(node.type_name):
            raise CapabilityMissingError(node.type_name)

        mode = VersionedMode.STAGE_UNIQUE if only_deleted_from_stage else VersionedMode.STAGE
        return self.store.children_of(node, Stage.LIVE, show_all=show_all, mode=mode)
