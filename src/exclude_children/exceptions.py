from typing import Optional


class ExcludeChildrenError(Exception):
    """Base exception for all errors raised by exclude_children."""

    pass


class CapabilityMissingError(ExcludeChildrenError):
    """
    Exception raised when live children are requested for a page type without versioning.

    Listing live children only makes sense for page types that keep a draft and a
    published copy. Callers must not ask for live children of other types; this error
    is not recovered from anywhere inside the package.

    Attributes:
        type_name (str): The page type that lacks the versioning capability.

    Example:
        >>> error = CapabilityMissingError("Folder")
        >>> str(error)
        'live_children() only works on versioned page types, Folder is not versioned'
    """

    def __init__(self, type_name: str) -> None:
        """
        Initialize the exception with the offending page type.

        Args:
            type_name (str): Name of the page type without versioning support.
        """
        self.type_name = type_name
        super().__init__(f"live_children() only works on versioned page types, {type_name} is not versioned")


class UnknownPageTypeError(ExcludeChildrenError, KeyError):
    """
    Exception raised when a page type name is not present in the type registry.

    Example:
        >>> error = UnknownPageTypeError("Missing")
        >>> error.type_name
        'Missing'
    """

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unknown page type: {type_name}")

    def __str__(self) -> str:
        return str(self.args[0])


class PageNotFoundError(ExcludeChildrenError, KeyError):
    """Exception raised when a page id is not present in the requested stage."""

    def __init__(self, page_id: int, stage: Optional[str] = None) -> None:
        self.page_id = page_id
        self.stage = stage
        message = f"Page not found: {page_id}"
        if stage:
            message += f" (stage: {stage})"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigurationError(ExcludeChildrenError):
    """
    Exception raised when type or page configuration is invalid.

    Attributes:
        source (Optional[str]): File the configuration was read from, if any.

    Example:
        >>> str(ConfigurationError("bad value", source="site.yaml"))
        'Configuration error in site.yaml: bad value'
        >>> str(ConfigurationError("bad value"))
        'Configuration error: bad value'
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        if source:
            full_message = f"Configuration error in {source}: {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.source = source
        self.original_message = message
