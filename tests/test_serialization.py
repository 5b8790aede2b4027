"""Tests for rendering and writing field-group JSON."""

import json
import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest
from vue_acf.engine import build_field_group
from vue_acf.exceptions import DestinationWriteError
from vue_acf.serialization.io import field_group_path, render_field_group, save_field_group, write_field_group


class TestRenderFieldGroup:
    def test_two_space_indent_and_trailing_newline(self, callout_metadata):
        text = render_field_group(build_field_group(callout_metadata))
        assert text.endswith("}\n")
        assert text.splitlines()[1] == '  "key": "group_callout_component",'

    def test_deterministic(self, callout_metadata):
        first = render_field_group(build_field_group(callout_metadata))
        second = render_field_group(build_field_group(callout_metadata))
        assert first == second

    def test_parses_back(self, callout_metadata):
        data = json.loads(render_field_group(build_field_group(callout_metadata)))
        assert [f["name"] for f in data["fields"]] == [p.name for p in callout_metadata.props]


class TestSaveFieldGroup:
    def test_creates_missing_directory(self, tmp_path, callout_metadata):
        dest = tmp_path / "acf-json"
        path = save_field_group(build_field_group(callout_metadata), dest)
        assert path == dest / "group_callout_component.json"
        assert path.is_file()

    def test_missing_parent_fails(self, tmp_path, callout_metadata):
        dest = tmp_path / "missing" / "acf-json"
        with pytest.raises(DestinationWriteError) as exc_info:
            save_field_group(build_field_group(callout_metadata), dest)
        assert exc_info.value.path == dest / "group_callout_component.json"
        assert not dest.exists()

    def test_overwrites_existing_file(self, tmp_path, callout_metadata):
        group = build_field_group(callout_metadata)
        target = field_group_path(group, tmp_path)
        target.write_text("stale", encoding="utf-8")
        save_field_group(group, tmp_path)
        assert target.read_text(encoding="utf-8") == render_field_group(group)

    def test_failed_write_leaves_no_file(self, tmp_path, callout_metadata):
        group = build_field_group(callout_metadata)
        with patch("vue_acf.serialization.io.os.replace", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(DestinationWriteError, match="No space left"):
                save_field_group(group, tmp_path)
        assert os.listdir(tmp_path) == []

    def test_failed_write_keeps_previous_file(self, tmp_path, callout_metadata):
        group = build_field_group(callout_metadata)
        target = field_group_path(group, tmp_path)
        target.write_text("previous", encoding="utf-8")
        with patch("vue_acf.serialization.io.os.replace", side_effect=OSError(5, "I/O error")):
            with pytest.raises(DestinationWriteError):
                save_field_group(group, tmp_path)
        assert target.read_text(encoding="utf-8") == "previous"
        assert sorted(os.listdir(tmp_path)) == [target.name]

    def test_new_file_follows_umask(self, tmp_path, callout_metadata):
        previous = os.umask(0o022)
        try:
            path = save_field_group(build_field_group(callout_metadata), tmp_path)
        finally:
            os.umask(previous)
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_overwrite_keeps_existing_mode(self, tmp_path, callout_metadata):
        group = build_field_group(callout_metadata)
        target = field_group_path(group, tmp_path)
        target.write_text("stale", encoding="utf-8")
        target.chmod(0o664)
        save_field_group(group, tmp_path)
        assert stat.S_IMODE(target.stat().st_mode) == 0o664

    def test_destination_is_a_file(self, tmp_path, callout_metadata):
        blocker = tmp_path / "acf-json"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(DestinationWriteError):
            save_field_group(build_field_group(callout_metadata), blocker)


class TestWriteFieldGroup:
    @pytest.mark.asyncio
    async def test_async_write(self, tmp_path: Path, callout_metadata):
        path = await write_field_group(build_field_group(callout_metadata), tmp_path)
        assert json.loads(path.read_text(encoding="utf-8"))["title"] == "Component: Callout"
