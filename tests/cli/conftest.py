"""Fixtures for command-line tests."""

from unittest.mock import patch

import pytest

SITE_YAML = """\
root_type: Page
types:
  - name: Page
    versioned: true
  - name: Article
    parent: Page
  - name: Gallery
    parent: Page
  - name: PhotoGallery
    parent: Gallery
  - name: Holder
    parent: Page
    excluded_children: [Gallery]
pages:
  - {id: 1, parent: 0, type: Holder, title: Holder, published: true}
  - {id: 2, parent: 1, type: Article, title: A, published: true}
  - {id: 3, parent: 1, type: Article, title: B}
  - {id: 4, parent: 1, type: PhotoGallery, title: C, published: true}
  - {id: 5, parent: 1, type: Article, title: Hidden, show_in_menus: false}
  - {id: 6, parent: 1, type: Article, title: Gone, published: true, draft: false}
  - {id: 7, parent: 0, type: Page, title: About}
"""


@pytest.fixture
def site_file(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text(SITE_YAML)
    return path


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from installing handlers on the root logger during tests."""
    with patch("exclude_children.cli.main.logging.basicConfig"):
        yield
