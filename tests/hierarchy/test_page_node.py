"""Unit tests for the Page record."""

import dataclasses

import pytest

from exclude_children.hierarchy.page_node import Page


def test_page_defaults():
    page = Page(id=1, parent_id=0, type_name="Page")
    assert page.title == ""
    assert page.show_in_menus
    assert page.sort == 0
    assert page.is_top_level


def test_page_label():
    assert Page(id=1, parent_id=0, type_name="Page", title="Home").label == "Home [Page]"
    assert Page(id=5, parent_id=1, type_name="Article").label == "#5 [Article]"


def test_page_is_immutable():
    page = Page(id=1, parent_id=0, type_name="Page")
    with pytest.raises(dataclasses.FrozenInstanceError):
        page.title = "Changed"


def test_page_equality():
    assert Page(id=1, parent_id=0, type_name="Page") == Page(id=1, parent_id=0, type_name="Page")
    assert Page(id=1, parent_id=0, type_name="Page") != Page(id=1, parent_id=0, type_name="Article")
