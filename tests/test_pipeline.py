"""Tests for verstamp.stamper.pipeline module."""

import re
from datetime import timedelta

import pytest

from verstamp.config.settings import Settings
from verstamp.stamper.pipeline import StampResult, stamp
from verstamp.stamper.template import strip_timestamp
from verstamp.utils.errors import ConfigReadError, MissingFieldError, WriteError


class TestStamp:
    def test_writes_artifact_with_manifest_version(self, project_root, artifact_path, fixed_now):
        result = stamp(project_root, now=fixed_now)

        assert isinstance(result, StampResult)
        assert result.version == "1.2.3"
        assert result.path == artifact_path
        assert result.written is True
        content = artifact_path.read_text()
        assert content == result.text
        assert 'return "1.2.3";' in content
        assert "// Last updated on 2024-03-01T12:30:45.123Z\n" in content

    def test_accessor_literal_equals_manifest_version(
        self, project_root, artifact_path, write_manifest
    ):
        write_manifest({"version": "0.0.1-beta"})

        stamp(project_root)

        literals = re.findall(r'return "([^"]*)";', artifact_path.read_text())
        assert literals == ["0.0.1-beta"]

    def test_default_timestamp_is_current(self, project_root, artifact_path):
        stamp(project_root)

        assert re.search(
            r"^// Last updated on \d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$",
            artifact_path.read_text(),
            re.MULTILINE,
        )

    def test_rerun_differs_only_by_timestamp(self, project_root, artifact_path, fixed_now):
        stamp(project_root, now=fixed_now)
        first = artifact_path.read_text()

        stamp(project_root, now=fixed_now + timedelta(minutes=1))
        second = artifact_path.read_text()

        assert first != second
        assert strip_timestamp(first) == strip_timestamp(second)

    def test_replaces_previous_artifact(self, project_root, artifact_path, write_manifest):
        artifact_path.write_text("hand edited\n")
        write_manifest({"version": "4.0.0"})

        stamp(project_root)

        content = artifact_path.read_text()
        assert "hand edited" not in content
        assert 'return "4.0.0";' in content

    def test_dry_run_writes_nothing(self, project_root, artifact_path, fixed_now):
        result = stamp(project_root, now=fixed_now, dry_run=True)

        assert result.written is False
        assert 'return "1.2.3";' in result.text
        assert not artifact_path.exists()

    def test_settings_select_manifest_and_artifact(self, project_root, fixed_now):
        (project_root / "pyproject.toml").write_text('[project]\nversion = "5.6.7"\n')
        (project_root / "contracts").mkdir()
        settings = Settings(
            manifest_path="pyproject.toml",
            output_dir="contracts",
            contract_name="TokenVersion",
        )

        result = stamp(project_root, settings, now=fixed_now)

        assert result.path == project_root / "contracts" / "TokenVersion.sol"
        assert "contract TokenVersion is IVersionedContract" in result.path.read_text()
        assert result.version == "5.6.7"

    def test_missing_manifest(self, project_root, artifact_path):
        (project_root / "package.json").unlink()

        with pytest.raises(ConfigReadError):
            stamp(project_root)

        assert not artifact_path.exists()

    def test_missing_version_leaves_artifact_untouched(
        self, project_root, artifact_path, write_manifest
    ):
        artifact_path.write_text("previous\n")
        write_manifest({"name": "revolution"})

        with pytest.raises(MissingFieldError):
            stamp(project_root)

        assert artifact_path.read_text() == "previous\n"

    def test_missing_output_directory(self, project_root):
        (project_root / "src" / "version").rmdir()

        with pytest.raises(WriteError):
            stamp(project_root)

    def test_dry_run_prints_no_progress(self, project_root, fixed_now, capsys):
        stamp(project_root, now=fixed_now, dry_run=True)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_output_path_override(self, project_root, fixed_now):
        (project_root / "out").mkdir()
        settings = Settings(output_path="out/V.sol")

        result = stamp(project_root, settings, now=fixed_now)

        assert result.path == project_root / "out" / "V.sol"
        assert 'return "1.2.3";' in result.path.read_text()
        assert not (project_root / "src" / "version" / "RevolutionVersion.sol").exists()

    def test_invalid_contract_name_writes_nothing(self, project_root):
        settings = Settings(contract_name="../../x")

        with pytest.raises(ConfigReadError, match="VERSTAMP_CONTRACT_NAME"):
            stamp(project_root, settings)

        assert not (project_root / "x.sol").exists()
        assert list((project_root / "src" / "version").iterdir()) == []
