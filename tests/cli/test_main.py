"""Unit tests for the CLI main module."""

import pytest

from exclude_children.cli.main import main


def run_main(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out.splitlines()


def test_main_treeview(capsys, site_file):
    """Test that the default action hides excluded children."""
    assert run_main(capsys, str(site_file)) == [
        "Site [Page]",
        "├── Holder [Holder]",
        "│   ├── A [Article]",
        "│   └── B [Article]",
        "└── About [Page]",
    ]


def test_main_other_action(capsys, site_file):
    lines = run_main(capsys, "-a", "edit", str(site_file))

    assert "│   └── C [PhotoGallery]" in lines


def test_main_show_all(capsys, site_file):
    lines = run_main(capsys, "--show-all", "-a", "getsubtree", str(site_file))

    assert "│   └── Hidden [Article]" in lines
    assert not any("C [PhotoGallery]" in line for line in lines)


def test_main_live(capsys, site_file):
    assert run_main(capsys, "--live", str(site_file)) == [
        "Site [Page]",
        "└── Holder [Holder]",
        "    ├── A [Article]",
        "    └── Gone [Article]",
    ]


def test_main_live_only_deleted_from_stage(capsys, site_file):
    assert run_main(capsys, "--live", "-D", str(site_file)) == ["Site [Page]"]


def test_main_exclude_override(capsys, site_file):
    """Test that -x adds to the configured exclusions."""
    assert run_main(capsys, "-x", "Holder=Article", str(site_file)) == [
        "Site [Page]",
        "├── Holder [Holder]",
        "└── About [Page]",
    ]


def test_main_config_file(capsys, site_file, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("Page:\n  excluded_children: [Holder]\n")

    assert run_main(capsys, "-c", str(config), str(site_file)) == ["Site [Page]", "└── About [Page]"]


def test_main_types(capsys, site_file):
    assert run_main(capsys, "--types", str(site_file)) == [
        "Page (versioned)",
        "├── Article",
        "├── Gallery",
        "│   └── PhotoGallery",
        "└── Holder",
    ]


def test_main_missing_site_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.yaml")])

    assert exc_info.value.code == 1
    assert "Error: Configuration error in" in capsys.readouterr().err


@pytest.mark.parametrize(
    "content",
    [
        "types:\n  - name: Page\npages:\n  - {id: 1, parent: abc, type: Page}\n",
        "types:\n  - name: Page\npages:\n  - {id: 1, parent: null, type: Page}\n",
        "types:\n  - name: Page\npages:\n  - {id: 1, type: Page, sort: x}\n",
        "root_type: [a]\ntypes:\n  - name: Page\n",
        "types:\n  - name: Page\n  - name: Article\n    parent: [Page]\n",
    ],
)
def test_main_malformed_site_file(capsys, tmp_path, content):
    """Test that malformed fields in the site file are reported without a traceback."""
    path = tmp_path / "site.yaml"
    path.write_text(content)

    with pytest.raises(SystemExit) as exc_info:
        main([str(path)])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith(f"Error: Configuration error in {path}: ")


def test_main_unversioned_live(capsys, tmp_path):
    """Test that listing live children of a non-versioned root is a runtime error."""
    path = tmp_path / "site.yaml"
    path.write_text("types:\n  - name: Folder\n")

    with pytest.raises(SystemExit) as exc_info:
        main(["--live", str(path)])

    assert exc_info.value.code == 1
    assert "Folder is not versioned" in capsys.readouterr().err


def test_main_invalid_arguments(capsys, site_file):
    with pytest.raises(SystemExit) as exc_info:
        main(["-D", str(site_file)])

    assert exc_info.value.code == 2
    assert "--only-deleted-from-stage requires --live" in capsys.readouterr().err
