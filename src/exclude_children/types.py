from enum import Enum
from os import PathLike
from typing import FrozenSet, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Page type names are plain strings, resolved through a TypeRegistry
TypeName = str

# Request actions of the admin page tree that trigger child filtering
ADMIN_TREE_ACTIONS: FrozenSet[str] = frozenset({"treeview", "getsubtree"})


class Stage(str, Enum):
    """Enumeration of the data stages a page can live in.

    Attributes:
        DRAFT: The working copy edited in the admin.
        LIVE: The published snapshot served to visitors.
    """

    DRAFT = "draft"
    LIVE = "live"


class VersionedMode(str, Enum):
    """How a live child listing relates to the draft stage.

    Values:
        STAGE: Pages present in the requested stage.
        STAGE_UNIQUE: Pages present in live but deleted from the draft stage.
    """

    STAGE = "stage"
    STAGE_UNIQUE = "stage_unique"
