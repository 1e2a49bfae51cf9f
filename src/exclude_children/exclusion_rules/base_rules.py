from abc import ABC, abstractmethod
from typing import Iterable, List

from exclude_children.hierarchy.page_node import Page


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for child page exclusion rules.

    This class serves as a contract for implementing rules that decide which pages
    are left out of a child listing. All implementations must provide logic for
    checking if a given page should be excluded. Adding individual rules is an
    optional capability that depends on the rule type.

    Example:
        >>> class HiddenTitleRules(BaseExclusionRules):
        ...     def exclude(self, page: Page) -> bool:
        ...         return page.title.startswith("_")
        >>> rules = HiddenTitleRules()
        >>> rules.exclude(Page(id=1, parent_id=0, type_name="Page", title="_drafts"))
        True
        >>> [p.title for p in rules.filter([Page(1, 0, "Page", "_a"), Page(2, 0, "Page", "b")])]
        ['b']
    """

    @abstractmethod
    def exclude(self, page: Page) -> bool:
        """
        Determine if a page should be excluded.

        Args:
            page (Page): The candidate child page.

        Returns:
            bool: True if the page should be excluded, False if it should be kept.
        """
        pass

    def filter(self, pages: Iterable[Page]) -> List[Page]:
        """
        Drop every excluded page, keeping the order of the rest.

        Args:
            pages: Candidate pages.

        Returns:
            A new list holding the pages that are not excluded.
        """
        return [page for page in pages if not self.exclude(page)]

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        This method may be overridden by subclasses that support programmatic rule
        addition. Rule types that don't support it use the default
        implementation which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g. a page type name).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
