"""Test configuration and fixtures for exclude_children."""

import pytest

from exclude_children.extension import ExcludeChildren
from exclude_children.hierarchy.hierarchy import Hierarchy
from exclude_children.hierarchy.page_node import Page
from exclude_children.hierarchy.site_store import SiteStore
from exclude_children.hierarchy.type_registry import TypeRegistry


@pytest.fixture
def registry():
    """Page types of a small site.

    Page (versioned)
    ├── Article
    ├── Gallery
    │   └── PhotoGallery
    └── Holder (excludes Gallery)
    Folder (not versioned, no show-in-menus flag)
    """
    registry = TypeRegistry()
    registry.register("Page", versioned=True)
    registry.register("Article", parent="Page")
    registry.register("Gallery", parent="Page")
    registry.register("PhotoGallery", parent="Gallery")
    registry.register("Holder", parent="Page", excluded_children=["Gallery"])
    registry.register("Folder", show_in_menus_field=False)
    return registry


@pytest.fixture
def store(registry):
    """Draft pages below a Holder, all of them published except the hidden one."""
    store = SiteStore(registry, root_type="Page")
    pages = [
        Page(id=1, parent_id=0, type_name="Holder", title="Holder"),
        Page(id=2, parent_id=1, type_name="Article", title="A"),
        Page(id=3, parent_id=1, type_name="Article", title="B"),
        Page(id=4, parent_id=1, type_name="Gallery", title="C"),
        Page(id=5, parent_id=1, type_name="PhotoGallery", title="D"),
        Page(id=6, parent_id=1, type_name="Article", title="Hidden", show_in_menus=False),
        Page(id=7, parent_id=0, type_name="Page", title="About"),
    ]
    for page in pages:
        store.write(page)
        if page.show_in_menus:
            store.publish(page.id)
    return store


@pytest.fixture
def hierarchy(store):
    return Hierarchy(store)


@pytest.fixture
def extension(hierarchy):
    return ExcludeChildren(hierarchy)


@pytest.fixture
def holder(store):
    return store.get(1)
