"""Hide configured page types from the children listed in the admin page tree.

Parent page types declare which child types the admin page tree should leave out,
either statically when the type is registered::

    registry.register("BlogHolder", parent="Page", excluded_children=["BlogEntry"])

or through a runtime override::

    registry.config.update("BlogHolder", "excluded_children", ["BlogEntry"])

Excluding a type also excludes all of its subtypes. Filtering only happens while the
page tree is being browsed (the ``treeview`` and ``getsubtree`` actions); every
other request gets the children unchanged, so front end menus and listings keep
showing the excluded pages.
"""

import logging
from typing import List, Optional, Set

from exclude_children.config import EXCLUDED_CHILDREN, Config
from exclude_children.exclusion_rules.type_rules import TypeExclusionRules
from exclude_children.hierarchy.hierarchy import Hierarchy
from exclude_children.hierarchy.page_node import Page
from exclude_children.hierarchy.type_registry import TypeRegistry
from exclude_children.request_context import RequestContext
from exclude_children.types import TypeName

logger = logging.getLogger(__name__)


class ExcludeChildren:
    """Child listing that filters excluded page types out of the admin page tree.

    Wraps a Hierarchy: children are listed by the wrapped hierarchy first and then
    filtered. The excluded set is worked out again on every call, so configuration
    changes apply immediately.

    Attributes:
        hierarchy (Hierarchy): The child listing being filtered.
        config (Config): Configuration holding ``excluded_children`` per type.

    Example:
        >>> from exclude_children.hierarchy.site_store import SiteStore
        >>> registry = TypeRegistry()
        >>> registry.register("Page", versioned=True)
        >>> registry.register("Article", parent="Page")
        >>> registry.register("Gallery", parent="Page")
        >>> registry.register("Holder", parent="Page", excluded_children=["Gallery"])
        >>> store = SiteStore(registry, root_type="Page")
        >>> store.write(Page(id=1, parent_id=0, type_name="Holder", title="P"))
        >>> for page_id, type_name in [(2, "Article"), (3, "Article"), (4, "Gallery")]:
        ...     store.write(Page(id=page_id, parent_id=1, type_name=type_name))
        >>> extension = ExcludeChildren(Hierarchy(store))
        >>> parent = store.get(1)
        >>> [page.id for page in extension.stage_children(parent, request=RequestContext("treeview"))]
        [2, 3]
        >>> [page.id for page in extension.stage_children(parent, request=RequestContext("edit"))]
        [2, 3, 4]
    """

    def __init__(self, hierarchy: Hierarchy, config: Optional[Config] = None) -> None:
        """Initialize the extension.

        Args:
            hierarchy: The child listing to filter.
            config: Configuration to read ``excluded_children`` from. Defaults to the
                configuration of the hierarchy's type registry.
        """
        self.hierarchy = hierarchy
        self.config = config if config is not None else hierarchy.registry.config

    @property
    def registry(self) -> TypeRegistry:
        return self.hierarchy.registry

    def exclusion_rules_for(self, node: Page) -> TypeExclusionRules:
        """Build the exclusion rules configured for the children of a page."""
        configured: Optional[List[TypeName]] = self.config.get(node.type_name, EXCLUDED_CHILDREN)
        return TypeExclusionRules(self.registry, configured or [])

    def get_excluded_types(self, node: Page) -> Set[TypeName]:
        """Get every page type hidden below a page: configured types plus their subtypes.

        Returns:
            The expanded set, empty when nothing is configured.
        """
        return set(self.exclusion_rules_for(node).excluded_types)

    def get_filtered_children(
        self, node: Page, children: List[Page], request: Optional[RequestContext] = None
    ) -> List[Page]:
        """Filter already listed children if the request browses the admin page tree.

        Args:
            node: The parent page, whose type carries the configuration.
            children: The candidate children.
            request: The in-flight request. Without one, nothing is filtered.

        Returns:
            The children without excluded types while browsing the page tree, and the
            candidate list itself otherwise.
        """
        if request is None or not request.is_tree_browsing():
            return children

        rules = self.exclusion_rules_for(node)
        if not rules.has_rules():
            return children

        filtered = rules.filter(children)
        logger.debug(
            "Hid %d of %d child page(s) of %s for action %s",
            len(children) - len(filtered),
            len(children),
            node.id,
            request.current_action(),
        )
        return filtered

    def stage_children(
        self, node: Page, show_all: bool = False, request: Optional[RequestContext] = None
    ) -> List[Page]:
        """Get the draft children of a page, filtered for the admin page tree."""
        children = self.hierarchy.stage_children(node, show_all)
        return self.get_filtered_children(node, children, request)

    def live_children(
        self,
        node: Page,
        show_all: bool = False,
        only_deleted_from_stage: bool = False,
        request: Optional[RequestContext] = None,
    ) -> List[Page]:
        """Get the live children of a page, filtered for the admin page tree.

        Raises:
            CapabilityMissingError: If the page's type is not versioned.
        """
        children = self.hierarchy.live_children(node, show_all, only_deleted_from_stage)
        return self.get_filtered_children(node, children, request)
