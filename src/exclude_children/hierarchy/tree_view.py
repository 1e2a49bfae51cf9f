"""Text rendering of the site tree as the admin page tree would show it."""

from typing import Iterator, Optional

from anytree import Node, RenderTree
from anytree.render import ContStyle

from exclude_children.extension import ExcludeChildren
from exclude_children.hierarchy.page_node import Page
from exclude_children.request_context import RequestContext
from exclude_children.types import Stage


class SiteTreeView:
    """Walks the site tree through a filtered child listing and renders it.

    Every page's children are requested through the extension with the given
    request, so when the request browses the page tree, excluded pages and
    everything below them are missing from the output.

    Attributes:
        children (ExcludeChildren): The child listing used for every page.
        stage (Stage): Stage whose children are listed.
        show_all (bool): Include pages hidden from menus.
        only_deleted_from_stage (bool): On the live stage, only list pages deleted
            from the draft stage.

    Example:
        >>> from exclude_children.hierarchy.hierarchy import Hierarchy
        >>> from exclude_children.hierarchy.site_store import SiteStore
        >>> from exclude_children.hierarchy.type_registry import TypeRegistry
        >>> registry = TypeRegistry()
        >>> registry.register("Page", versioned=True)
        >>> registry.register("BlogEntry", parent="Page")
        >>> registry.register("BlogHolder", parent="Page", excluded_children=["BlogEntry"])
        >>> store = SiteStore(registry, root_type="Page")
        >>> store.write(Page(id=1, parent_id=0, type_name="BlogHolder", title="Blog"))
        >>> store.write(Page(id=2, parent_id=1, type_name="BlogEntry", title="Hello"))
        >>> view = SiteTreeView(ExcludeChildren(Hierarchy(store)))
        >>> print(view.get_tree_representation(store.root, RequestContext("treeview")))
        Site [Page]
        └── Blog [BlogHolder]
        >>> print(view.get_tree_representation(store.root, RequestContext("edit")))
        Site [Page]
        └── Blog [BlogHolder]
            └── Hello [BlogEntry]
    """

    def __init__(
        self,
        children: ExcludeChildren,
        stage: Stage = Stage.DRAFT,
        show_all: bool = False,
        only_deleted_from_stage: bool = False,
    ) -> None:
        self.children = children
        self.stage = stage
        self.show_all = show_all
        self.only_deleted_from_stage = only_deleted_from_stage

    def _list(self, page: Page, request: Optional[RequestContext]) -> list:
        if self.stage == Stage.LIVE:
            return self.children.live_children(page, self.show_all, self.only_deleted_from_stage, request=request)
        return self.children.stage_children(page, self.show_all, request=request)

    def build_tree(self, root: Page, request: Optional[RequestContext] = None) -> Node:
        """Build an anytree tree of pages below ``root``.

        Each node is named after the page label and carries the page as ``page``.

        Raises:
            CapabilityMissingError: When listing live children of a non-versioned type.
        """
        root_node = Node(root.label, page=root)
        pending = [root_node]
        while pending:
            node = pending.pop()
            for child in self._list(node.page, request):
                pending.append(Node(child.label, parent=node, page=child))
        return root_node

    def stream_tree_representation(self, root: Page, request: Optional[RequestContext] = None) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        Yields:
            Lines of the tree, the root first, using box drawing connectors.
        """
        for pre, _, node in RenderTree(self.build_tree(root, request), style=ContStyle()):
            yield f"{pre}{node.name}"

    def get_tree_representation(self, root: Page, request: Optional[RequestContext] = None) -> str:
        return "\n".join(self.stream_tree_representation(root, request))
