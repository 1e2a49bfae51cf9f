"""Hide configured page types from the admin page tree.

This package provides an extension for a page hierarchy that leaves configured
child page types, and their subtypes, out of the children listed while the admin
page tree is browsed.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("exclude-children")
except PackageNotFoundError:
    __version__ = "unknown"
