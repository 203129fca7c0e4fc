"""Tests for helmfile loading."""

import pytest

from helmfile_next.core.manifest_loader import load_helmfile
from helmfile_next.errors import ManifestNotFoundError, ManifestParseError
from helmfile_next.models.release import ReleaseDeclaration


class TestLoadHelmfile:
    """Tests for load_helmfile."""

    def test_releases_in_document_order(self, example_helmfile):
        releases = load_helmfile(example_helmfile)
        assert releases == [
            ReleaseDeclaration(name="a", chart="repoA/a", version="1.0.0"),
            ReleaseDeclaration(name="b", chart="./local/b", version="2.0.0"),
        ]

    def test_installed_left_unset(self, example_helmfile):
        releases = load_helmfile(example_helmfile)
        assert all(r.installed is None for r in releases)

    def test_installed_flag_kept(self, write_helmfile):
        path = write_helmfile(
            "releases:\n"
            "  - {name: a, chart: repo/a, version: 1.0.0, installed: false}\n"
            "  - {name: b, chart: repo/b, version: 1.0.0, installed: true}\n"
        )
        assert [r.installed for r in load_helmfile(path)] == [False, True]

    def test_numeric_version_read_as_text(self, write_helmfile):
        path = write_helmfile("releases:\n  - {name: a, chart: repo/a, version: 1.10}\n")
        assert load_helmfile(path)[0].version == "1.1"

    def test_missing_version_is_empty(self, write_helmfile):
        path = write_helmfile("releases:\n  - {name: a, chart: repo/a}\n")
        assert load_helmfile(path)[0].version == ""

    def test_no_releases(self, write_helmfile):
        assert load_helmfile(write_helmfile("repositories: []\n")) == []

    def test_empty_file(self, write_helmfile):
        assert load_helmfile(write_helmfile("")) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            load_helmfile(tmp_path / "nope.yaml")

    def test_directory_is_not_found(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            load_helmfile(tmp_path)

    @pytest.mark.parametrize(
        "content",
        [
            "releases: [unclosed\n",
            "- just\n- a list\n",
            "releases: not-a-list\n",
            "releases:\n  - plain string\n",
            "releases:\n  - {chart: repo/a, version: 1.0.0}\n",
            "releases:\n  - {name: a, version: 1.0.0}\n",
            "releases:\n  - {name: a, chart: repo/a, version: [1]}\n",
            "releases:\n  - {name: a, chart: repo/a, version: 1.0.0, installed: maybe}\n",
        ],
    )
    def test_malformed(self, write_helmfile, content):
        with pytest.raises(ManifestParseError):
            load_helmfile(write_helmfile(content))
