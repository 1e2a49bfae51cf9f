"""Page hierarchy: page types, pages, their storage and child listings.

This package provides the collaborators the child filter works with: a registry of
page types, a store holding draft and live pages, the base child listing and a text
renderer for the resulting site tree.
"""
