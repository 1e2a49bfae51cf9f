"""Command-line argument parsing for exclude-children.

This module defines the command-line interface for exclude-children,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from exclude_children import __version__
from exclude_children.types import ADMIN_TREE_ACTIONS


def create_override_action() -> Type[argparse.Action]:
    """Create a custom action class collecting configuration overrides.

    Config files (-c) and single exclusions (-x) are collected into one list on the
    namespace, ``overrides``, as ``(option, value)`` pairs. This preserves the exact
    order in which they appear on the command line, which is the order they are
    applied in.

    Returns:
        A custom action class for use with argparse.
    """

    class OverrideAction(argparse.Action):
        """Action to record configuration overrides as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if getattr(namespace, "overrides", None) is None:
                namespace.overrides = []

            if option_string in ("-c", "--config"):
                namespace.overrides.append(("config", Path(str(values))))
            else:  # -x/--exclude
                parent, sep, child = str(values).partition("=")
                if not sep or not parent or not child:
                    parser.error(f"argument {option_string}: expected PARENT=CHILD, got '{values}'")
                namespace.overrides.append(("exclude", (parent, child)))

    return OverrideAction


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with exclude-children's options.
    """
    description = """
    exclude-children: preview the admin page tree of a site with excluded child page types.

    Reads a YAML site description (page types and pages), applies any configuration
    overrides and prints the site tree the way the admin page tree lists it. Page
    types configured in a parent type's excluded_children setting, and their
    subtypes, are hidden below that parent while the request action is one of the
    page tree actions (treeview, getsubtree).
    """

    epilog = """
    Examples:
      # Show the page tree as the admin renders it
      exclude-children site.yaml

      # Show the unfiltered tree, as any other request sees it
      exclude-children -a edit site.yaml

      # Apply overrides from a config file and from the command line
      exclude-children -c overrides.yaml -x BlogHolder=BlogEntry site.yaml

      # List the live stage including pages hidden from menus
      exclude-children --live --show-all site.yaml

      # Print the registered page types
      exclude-children --types site.yaml
    """

    parser = argparse.ArgumentParser(
        prog="exclude-children",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"exclude-children {__version__}",
        help="Show the version and exit",
    )

    OverrideAction = create_override_action()

    parser.add_argument("site_file", type=Path, help="YAML file describing the page types and pages of the site.")
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        action=OverrideAction,
        help="YAML file with per-type configuration overrides (can be specified multiple times).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        metavar="PARENT=CHILD",
        action=OverrideAction,
        help="Exclude CHILD pages (and subtypes) below PARENT pages (can be specified multiple times).",
    )
    parser.add_argument(
        "-a",
        "--action",
        default="treeview",
        help=f"Request action to render for (default: treeview). Filtering applies to: "
        f"{', '.join(sorted(ADMIN_TREE_ACTIONS))}.",
    )
    parser.add_argument("--live", action="store_true", help="List children from the live stage instead of draft.")
    parser.add_argument(
        "-D",
        "--only-deleted-from-stage",
        action="store_true",
        help="With --live, only list pages deleted from the draft stage.",
    )
    parser.add_argument("--show-all", action="store_true", help="Include pages that are hidden from menus.")
    parser.add_argument("--types", action="store_true", help="Print the page type hierarchy instead of the site tree.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    parser.set_defaults(overrides=None)

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.only_deleted_from_stage and not args.live:
        raise ValueError("--only-deleted-from-stage requires --live")
    if not args.action:
        raise ValueError("--action must not be empty")
