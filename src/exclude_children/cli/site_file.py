"""Loading of YAML site descriptions for the command-line interface.

A site file describes the page types and the pages of a site::

    root_type: Page
    types:
      - name: Page
        versioned: true
      - name: BlogHolder
        parent: Page
        excluded_children: [BlogEntry]
      - name: BlogEntry
        parent: Page
    pages:
      - {id: 1, parent: 0, type: BlogHolder, title: Blog, published: true}
      - {id: 2, parent: 1, type: BlogEntry, title: Hello, show_in_menus: false}

Pages are written to the draft stage in file order. ``published: true`` also
copies them to live; ``draft: false`` removes them from the draft stage again,
which leaves published pages live only.
"""

import logging
from typing import Any, Dict, List, Tuple

import yaml

from exclude_children.exceptions import ConfigurationError, ExcludeChildrenError
from exclude_children.hierarchy.page_node import Page
from exclude_children.hierarchy.site_store import SiteStore
from exclude_children.hierarchy.type_registry import TypeRegistry
from exclude_children.types import PathType

logger = logging.getLogger(__name__)


def _require(entry: Dict[str, Any], key: str, kind: type, what: str, source: str) -> Any:
    if key not in entry:
        raise ConfigurationError(f"{what} is missing '{key}'", source)
    value = entry[key]
    if not isinstance(value, kind) or isinstance(value, bool) and kind is not bool:
        raise ConfigurationError(f"{what}: '{key}' must be {kind.__name__}, got {type(value).__name__}", source)
    return value


def _optional(entry: Dict[str, Any], key: str, kind: type, default: Any, what: str, source: str) -> Any:
    if key not in entry:
        return default
    return _require(entry, key, kind, what, source)


def _register_types(registry: TypeRegistry, types: List[Any], source: str) -> None:
    for index, entry in enumerate(types):
        what = f"types[{index}]"
        if not isinstance(entry, dict):
            raise ConfigurationError(f"{what} must be a mapping", source)
        excluded = entry.get("excluded_children")
        if excluded is not None and not (isinstance(excluded, list) and all(isinstance(n, str) for n in excluded)):
            raise ConfigurationError(f"{what}: 'excluded_children' must be a list of type names", source)
        parent = entry.get("parent")
        if parent is not None:
            _require(entry, "parent", str, what, source)
        try:
            registry.register(
                _require(entry, "name", str, what, source),
                parent=parent,
                versioned=bool(entry.get("versioned", False)),
                show_in_menus_field=bool(entry.get("show_in_menus_field", True)),
                excluded_children=excluded,
            )
        except ConfigurationError as e:
            raise ConfigurationError(e.original_message, source) from None


def _write_pages(store: SiteStore, pages: List[Any], source: str) -> None:
    for index, entry in enumerate(pages):
        what = f"pages[{index}]"
        if not isinstance(entry, dict):
            raise ConfigurationError(f"{what} must be a mapping", source)
        page = Page(
            id=_require(entry, "id", int, what, source),
            parent_id=_optional(entry, "parent", int, 0, what, source),
            type_name=_require(entry, "type", str, what, source),
            title=str(entry.get("title", "")),
            show_in_menus=bool(entry.get("show_in_menus", True)),
            sort=_optional(entry, "sort", int, 0, what, source),
        )
        try:
            store.write(page)
            if entry.get("published", False):
                store.publish(page.id)
            if not entry.get("draft", True):
                store.delete_from_stage(page.id)
        except (ExcludeChildrenError, ValueError) as e:
            raise ConfigurationError(f"{what}: {e}", source) from None


def load_site_file(path: PathType) -> Tuple[TypeRegistry, SiteStore]:
    """Build a type registry and a populated store from a YAML site file.

    Args:
        path: The site file.

    Returns:
        The registry and the store.

    Raises:
        ConfigurationError: If the file is missing, not valid YAML or malformed.
    """
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError("file not found", source)
    except OSError as e:
        raise ConfigurationError(f"cannot read file: {e}", source)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML syntax: {e}", source)

    if not isinstance(data, dict):
        raise ConfigurationError("site file must be a YAML mapping", source)

    types = data.get("types") or []
    pages = data.get("pages") or []
    if not isinstance(types, list) or not isinstance(pages, list):
        raise ConfigurationError("'types' and 'pages' must be lists", source)

    registry = TypeRegistry()
    _register_types(registry, types, source)

    root_type = data.get("root_type")
    if root_type is None:
        if not len(registry):
            raise ConfigurationError("no page types defined", source)
        root_type = next(iter(registry))
    if not isinstance(root_type, str):
        raise ConfigurationError(f"'root_type' must be str, got {type(root_type).__name__}", source)
    if root_type not in registry:
        raise ConfigurationError(f"root type '{root_type}' is not a registered type", source)

    store = SiteStore(registry, root_type=root_type)
    _write_pages(store, pages, source)

    logger.debug("Loaded %d type(s) and %d page(s) from %s", len(registry), len(pages), source)
    return registry, store
