"""Unit tests for command-line argument parsing."""

from pathlib import Path

import pytest

from exclude_children.cli.argparser import create_parser, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args(["site.yaml"])

    assert args.site_file == Path("site.yaml")
    assert args.action == "treeview"
    assert args.overrides is None
    assert not args.live
    assert not args.show_all
    assert not args.only_deleted_from_stage
    assert not args.types
    assert not args.verbose


def test_overrides_keep_command_line_order(parser):
    """Test that -c and -x options are recorded in the order they appear."""
    args = parser.parse_args(["-x", "Holder=Gallery", "-c", "a.yaml", "--exclude", "Blog=Entry", "site.yaml"])

    assert args.overrides == [
        ("exclude", ("Holder", "Gallery")),
        ("config", Path("a.yaml")),
        ("exclude", ("Blog", "Entry")),
    ]


@pytest.mark.parametrize("value", ["Holder", "=Gallery", "Holder="])
def test_invalid_exclude(parser, capsys, value):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-x", value, "site.yaml"])

    assert exc_info.value.code == 2
    assert "expected PARENT=CHILD" in capsys.readouterr().err


def test_missing_site_file_argument(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args([])

    assert exc_info.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("exclude-children ")


def test_validate_args(parser):
    validate_args(parser.parse_args(["--live", "-D", "site.yaml"]))

    with pytest.raises(ValueError, match="--only-deleted-from-stage requires --live"):
        validate_args(parser.parse_args(["-D", "site.yaml"]))

    with pytest.raises(ValueError, match="--action must not be empty"):
        validate_args(parser.parse_args(["-a", "", "site.yaml"]))
