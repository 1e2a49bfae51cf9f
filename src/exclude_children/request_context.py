"""Read-only view of the request being handled."""

from dataclasses import dataclass
from typing import Optional

from exclude_children.types import ADMIN_TREE_ACTIONS


@dataclass(frozen=True)
class RequestContext:
    """The in-flight request, as far as child filtering is concerned.

    Attributes:
        action (Optional[str]): Name of the controller action handling the request.
        controller (Optional[str]): Name of the controller, informational only.

    Example:
        >>> RequestContext(action="treeview").is_tree_browsing()
        True
        >>> RequestContext(action="edit").is_tree_browsing()
        False
        >>> RequestContext().current_action() is None
        True
    """

    action: Optional[str] = None
    controller: Optional[str] = None

    def current_action(self) -> Optional[str]:
        """Get the action identifier of the request, if any."""
        return self.action

    def is_tree_browsing(self) -> bool:
        """Check if the request renders the admin page tree."""
        return self.action in ADMIN_TREE_ACTIONS
