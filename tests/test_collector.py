"""Tests for cfgenerator.volumes.collector."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from cfgenerator.errors import CollectionError
from cfgenerator.volumes.collector import collect


class TestCollect:
    def test_single_file_uses_base_name(self, tmp_path: Path):
        secret = tmp_path / "DATABASE_PASSWORD"
        secret.write_text("s3cr3t\n")

        assert dict(collect([secret])) == {"DATABASE_PASSWORD": "s3cr3t\n"}

    def test_directory_loads_direct_files(self, configmap: Path):
        assert dict(collect([str(configmap)])) == {
            "API_PORT": "8080",
            "DATABASE_USERNAME": "app",
        }

    def test_subdirectories_are_not_traversed(self, configmap: Path):
        nested = configmap / "nested"
        nested.mkdir()
        (nested / "HIDDEN").write_text("nope")

        variables = collect([configmap])

        assert "HIDDEN" not in variables
        assert "nested" not in variables

    def test_empty_path_list(self):
        assert dict(collect([])) == {}

    def test_empty_directory(self, tmp_path: Path):
        assert dict(collect([tmp_path])) == {}

    def test_last_path_wins_on_collision(self, tmp_path: Path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "PORT").write_text("1")
        (second / "PORT").write_text("2")

        assert collect([first, second])["PORT"] == "2"
        assert collect([second, first])["PORT"] == "1"

    def test_file_overrides_directory_entry(self, configmap: Path, tmp_path: Path):
        override_dir = tmp_path / "override"
        override_dir.mkdir()
        override = override_dir / "API_PORT"
        override.write_text("9090")

        variables = collect([configmap, override])

        assert variables["API_PORT"] == "9090"
        assert variables["DATABASE_USERNAME"] == "app"

    def test_missing_path_fails(self, configmap: Path, tmp_path: Path):
        missing = tmp_path / "missing"

        with pytest.raises(CollectionError, match="missing"):
            collect([configmap, missing])

    def test_result_is_read_only(self, configmap: Path):
        variables = collect([configmap])

        with pytest.raises(TypeError):
            variables["NEW"] = "value"  # type: ignore[index]

    def test_symlinked_files_are_loaded(self, tmp_path: Path):
        data = tmp_path / "..data"
        data.mkdir()
        (data / "TOKEN").write_text("abc")
        volume = tmp_path / "secret"
        volume.mkdir()
        os.symlink(data / "TOKEN", volume / "TOKEN")
        os.symlink(data, volume / "..data")

        assert dict(collect([volume])) == {"TOKEN": "abc"}

    def test_undecodable_content_fails(self, tmp_path: Path):
        blob = tmp_path / "BLOB"
        blob.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(CollectionError, match="BLOB"):
            collect([blob])

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    def test_special_file_fails(self, tmp_path: Path):
        fifo = tmp_path / "PIPE"
        os.mkfifo(fifo)

        with pytest.raises(CollectionError, match="neither a regular file"):
            collect([fifo])
