"""Tests for trident_autoclass CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from trident_autoclass.cli import main


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------


class TestVersionFlag:
    def test_version_exits_zero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# storage-class command
# ---------------------------------------------------------------------------


class TestStorageClassCommand:
    def test_pinned_class(self, backends_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "--log-level", "ERROR",
                "storage-class",
                "--backends", str(backends_file),
                "--opt", "pool=pool3",
                "--opt", "minIOPS=int:500",
                "--opt", "bogus=!!",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["name"].startswith("trident-auto-")
        assert data["pools"] == {"B2": ["pool3"]}
        assert list(data["attributes"]) == ["minIOPS"]

    def test_without_backends(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--log-level", "ERROR", "storage-class", "-o", "pool=pool1"],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["pools"] == {}

    def test_bad_option_pair(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["storage-class", "--opt", "novalue"])
        assert result.exit_code == 1
        assert "key=value" in result.output

    def test_bad_backends_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('[{"storage": {}}]', encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["storage-class", "--backends", str(bad)])
        assert result.exit_code == 1
        assert "Error" in result.output


# ---------------------------------------------------------------------------
# volume command
# ---------------------------------------------------------------------------


class TestVolumeCommand:
    def test_volume_output(self, backends_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "--log-level", "ERROR",
                "volume", "vol1",
                "--backends", str(backends_file),
                "--opt", "size=2g",
                "--opt", "fstype=xfs",
                "--opt", "aggregate=pool2",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["volume"]["name"] == "vol1"
        assert data["volume"]["size"] == str(2 * 1024 ** 3)
        assert data["volume"]["file_system"] == "xfs"
        assert data["volume"]["protocol"] == "any"
        assert data["volume"]["storage_class"] == data["storage_class"]["name"]
        assert data["storage_class"]["pools"] == {"B1": ["pool2"]}

    def test_bad_size(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, ["--log-level", "ERROR", "volume", "vol1", "--opt", "size=huge"]
        )
        assert result.exit_code == 1
        assert "Error creating volume" in result.output

    def test_oversized_size(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "--log-level", "ERROR",
                "volume", "vol1",
                "--opt", "size=1" + "0" * 400 + ".5g",
            ],
        )
        assert result.exit_code == 1
        assert "Error creating volume" in result.output


# ---------------------------------------------------------------------------
# hash command
# ---------------------------------------------------------------------------


class TestHashCommand:
    def test_same_options_same_name(self) -> None:
        runner = CliRunner()
        first = runner.invoke(
            main, ["hash", "-o", "a=int:1", "-o", "b=bool:true"]
        )
        second = runner.invoke(
            main, ["hash", "-o", "b=bool:true", "-o", "a=int:1"]
        )
        assert first.exit_code == 0, first.output
        assert first.output == second.output
        assert first.output.startswith("trident-auto-")

    def test_different_options_different_name(self) -> None:
        runner = CliRunner()
        first = runner.invoke(main, ["hash", "-o", "a=int:1"])
        second = runner.invoke(main, ["hash", "-o", "a=int:2"])
        assert first.output != second.output
