"""Per-type configuration with static declarations and runtime overrides.

Every page type can carry configuration values such as ``excluded_children``.
Values come from two places: static declarations made when the type is
registered, and runtime overrides applied with :meth:`Config.update` (typically
loaded from a YAML file with :func:`load_config_file`).

Lookups inherit through the type hierarchy: a subtype sees the values of its
ancestors merged with its own. Sequence values are merged (base type first,
duplicates dropped); any other value is taken from the most specific type that
defines it.

Example YAML override file::

    BlogHolder:
      excluded_children:
        - BlogEntry
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import yaml

from exclude_children.exceptions import ConfigurationError
from exclude_children.types import PathType, TypeName

if TYPE_CHECKING:
    from exclude_children.hierarchy.type_registry import TypeRegistry

logger = logging.getLogger(__name__)

EXCLUDED_CHILDREN = "excluded_children"


def _check_value(type_name: TypeName, key: str, value: Any) -> None:
    if key != EXCLUDED_CHILDREN:
        return
    if not isinstance(value, (list, tuple)) or not all(isinstance(name, str) for name in value):
        raise ConfigurationError(f"'{type_name}.{key}' must be a list of type names, got {value!r}")


def _merge(current: Any, value: Any) -> Any:
    """Merge a new value into an existing one, appending to sequences."""
    if isinstance(value, (list, tuple)):
        merged = list(current) if isinstance(current, list) else []
        for item in value:
            if item not in merged:
                merged.append(item)
        return merged
    return value


class Config:
    """Configuration store keyed by page type name.

    Attributes:
        registry (Optional[TypeRegistry]): Type hierarchy used for inheritance. Without
            a registry, lookups only see the type's own values.

    Example:
        >>> config = Config()
        >>> config.declare("BlogHolder", "excluded_children", ["BlogEntry"])
        >>> config.update("BlogHolder", "excluded_children", ["Gallery", "BlogEntry"])
        >>> config.get("BlogHolder", "excluded_children")
        ['BlogEntry', 'Gallery']
        >>> config.get("Page", "excluded_children") is None
        True
    """

    def __init__(self, registry: Optional["TypeRegistry"] = None) -> None:
        self.registry = registry
        self._declared: Dict[TypeName, Dict[str, Any]] = {}
        self._overrides: Dict[TypeName, Dict[str, Any]] = {}

    def declare(self, type_name: TypeName, key: str, value: Any) -> None:
        """Record a static declaration for a type, replacing any earlier declaration."""
        _check_value(type_name, key, value)
        self._declared.setdefault(type_name, {})[key] = _merge(None, value)

    def update(self, type_name: TypeName, key: str, value: Any) -> None:
        """Apply a runtime override.

        Sequence values are appended to whatever the type already has for the key
        (declared or overridden), dropping duplicates. Other values replace it.

        Raises:
            ConfigurationError: If ``excluded_children`` is given anything but a list
                of type names.
        """
        _check_value(type_name, key, value)
        current = self._overrides.get(type_name, {}).get(key, self._declared.get(type_name, {}).get(key))
        self._overrides.setdefault(type_name, {})[key] = _merge(current, value)
        logger.debug("Config override %s.%s = %r", type_name, key, self._overrides[type_name][key])

    def remove(self, type_name: TypeName, key: str) -> None:
        """Drop both the declaration and any override of a key for a type."""
        self._declared.get(type_name, {}).pop(key, None)
        self._overrides.get(type_name, {}).pop(key, None)

    def get_own(self, type_name: TypeName, key: str) -> Any:
        """Get the value defined directly on a type, ignoring its ancestors."""
        if key in self._overrides.get(type_name, {}):
            return self._overrides[type_name][key]
        return self._declared.get(type_name, {}).get(key)

    def get(self, type_name: TypeName, key: str, inherited: bool = True) -> Any:
        """Look up a configuration value for a type.

        Args:
            type_name: Page type to look up.
            key: Configuration key.
            inherited: Merge in values of ancestor types. Defaults to True.

        Returns:
            The merged value, or None when no type in the chain defines the key.
        """
        if not inherited or self.registry is None or type_name not in self.registry:
            return self.get_own(type_name, key)

        result: Any = None
        for ancestor in self.registry.ancestry(type_name):
            value = self.get_own(ancestor, key)
            if value is None:
                continue
            result = _merge(result, value)
        return result


def _check_overrides(data: Any, source: str) -> Dict[TypeName, Dict[str, Any]]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a YAML mapping, got {type(data).__name__}", source)

    for type_name, settings in data.items():
        if not isinstance(type_name, str):
            raise ConfigurationError(f"Type names must be strings, got {type(type_name).__name__}", source)
        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"Settings for '{type_name}' must be a mapping, got {type(settings).__name__}", source
            )
        excluded = settings.get(EXCLUDED_CHILDREN)
        if excluded is not None:
            if not isinstance(excluded, list) or not all(isinstance(name, str) for name in excluded):
                raise ConfigurationError(f"'{type_name}.{EXCLUDED_CHILDREN}' must be a list of type names", source)
    return data


def load_config_file(path: PathType, config: Config) -> List[TypeName]:
    """Load runtime overrides from a YAML file into a Config.

    Args:
        path: YAML file mapping type names to mappings of configuration keys.
        config: The configuration to update.

    Returns:
        The type names that received overrides, in file order.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid YAML, or
            has the wrong shape.
    """
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise ConfigurationError("file not found", source)
    except OSError as e:
        raise ConfigurationError(f"cannot read file: {e}", source)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML syntax: {e}", source)

    overrides = _check_overrides(data, source)
    for type_name, settings in overrides.items():
        for key, value in settings.items():
            config.update(type_name, key, value)

    logger.debug("Loaded config overrides for %d type(s) from %s", len(overrides), source)
    return list(overrides)
