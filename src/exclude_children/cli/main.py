"""Command-line interface for exclude-children.

This module provides the ``exclude-children`` command, which loads a YAML site
description and prints the site tree as the admin page tree would list it, with
excluded child page types hidden.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including invalid site or config files)
    2: Command-line syntax error

Example:
    # Preview the admin page tree
    $ exclude-children site.yaml

    # Display version information
    $ exclude-children --version
"""

import argparse
import logging
import sys
from typing import List, Optional

from exclude_children.cli.argparser import create_parser, validate_args
from exclude_children.cli.site_file import load_site_file
from exclude_children.config import EXCLUDED_CHILDREN, Config, load_config_file
from exclude_children.exceptions import ExcludeChildrenError
from exclude_children.extension import ExcludeChildren
from exclude_children.hierarchy.hierarchy import Hierarchy
from exclude_children.hierarchy.tree_view import SiteTreeView
from exclude_children.request_context import RequestContext
from exclude_children.types import Stage


def apply_overrides(args: argparse.Namespace, config: Config) -> None:
    """Apply -c and -x overrides to the configuration, in command-line order."""
    for option, value in args.overrides or []:
        if option == "config":
            load_config_file(value, config)
        else:
            parent, child = value
            config.update(parent, EXCLUDED_CHILDREN, [child])


def run(args: argparse.Namespace) -> List[str]:
    """Produce the output lines for parsed arguments.

    Raises:
        ExcludeChildrenError: If loading fails or the requested listing is not possible.
    """
    registry, store = load_site_file(args.site_file)
    apply_overrides(args, registry.config)

    if args.types:
        return registry.render().splitlines()

    extension = ExcludeChildren(Hierarchy(store))
    view = SiteTreeView(
        extension,
        stage=Stage.LIVE if args.live else Stage.DRAFT,
        show_all=args.show_all,
        only_deleted_from_stage=args.only_deleted_from_stage,
    )
    request = RequestContext(action=args.action, controller="cli")
    return list(view.stream_tree_representation(store.root, request))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the exclude-children command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        for line in run(args):
            print(line)
    except ExcludeChildrenError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        sys.stderr.close()
        sys.exit(1)


if __name__ == "__main__":
    main()
