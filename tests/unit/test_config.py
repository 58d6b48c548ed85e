"""Unit tests for openclaw_patch.config JSON file helpers."""

from __future__ import annotations

import json
from unittest import mock

import pytest

from openclaw_patch.config import (
    dump_config,
    ensure_object,
    load_config,
    resolve_config_path,
    write_config,
)
from openclaw_patch.errors import ConfigNotFoundError, InvalidJsonError


class TestResolveConfigPath:
    """Tests for resolve_config_path()."""

    def test_empty_value(self):
        with pytest.raises(ConfigNotFoundError, match="CONFIG_FILE is not set"):
            resolve_config_path("")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError, match="not found"):
            resolve_config_path(str(tmp_path / "missing.json"))

    def test_directory_is_not_a_config(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            resolve_config_path(str(tmp_path))

    def test_existing_file(self, config_file):
        path = config_file({})
        assert resolve_config_path(str(path)) == path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_valid_object(self, config_file):
        path = config_file({"key": "value"})
        assert load_config(path) == {"key": "value"}

    def test_invalid_json(self, config_file):
        path = config_file("not json")
        with pytest.raises(InvalidJsonError, match="Invalid JSON"):
            load_config(path)

    def test_empty_file(self, config_file):
        path = config_file("")
        with pytest.raises(InvalidJsonError):
            load_config(path)

    @pytest.mark.parametrize("text", ["[]", "42", '"str"', "null"])
    def test_non_object_top_level(self, config_file, text):
        path = config_file(text)
        with pytest.raises(InvalidJsonError, match="must contain a JSON object"):
            load_config(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "openclaw.json"
        path.write_bytes(b'{"name": "\xff"}')
        with pytest.raises(InvalidJsonError, match="UTF-8"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "gone.json")

    def test_unreadable_file(self, config_file):
        path = config_file({})
        with mock.patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigNotFoundError, match="Cannot read"):
                load_config(path)

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_rejected(self, config_file, token):
        path = config_file('{"a": ' + token + "}")
        with pytest.raises(InvalidJsonError, match=token):
            load_config(path)

    def test_error_is_chained(self, config_file):
        path = config_file("{")
        with pytest.raises(InvalidJsonError) as exc_info:
            load_config(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


class TestDumpAndWrite:
    """Tests for dump_config() and write_config()."""

    def test_two_space_indent_no_trailing_newline(self):
        text = dump_config({"a": {"b": 1}})
        assert text == '{\n  "a": {\n    "b": 1\n  }\n}'

    def test_non_ascii_kept(self):
        assert dump_config({"name": "café"}) == '{\n  "name": "café"\n}'

    def test_lone_surrogate_escaped(self):
        assert dump_config({"note": "\ud800"}) == '{\n  "note": "\\ud800"\n}'

    def test_surrogate_pair_written_as_utf8(self):
        assert dump_config({"e": "\U0001f600"}) == '{\n  "e": "\U0001f600"\n}'

    def test_write_in_place(self, config_file):
        path = config_file({"old": True})
        write_config(path, {"new": True})
        assert json.loads(path.read_text()) == {"new": True}

    def test_write_in_place_does_not_rename(self, config_file):
        path = config_file({})
        with mock.patch("openclaw_patch.config.atomic_replace") as replace:
            write_config(path, {"a": 1})
        replace.assert_not_called()

    def test_write_atomic(self, config_file):
        path = config_file({})
        with mock.patch("openclaw_patch.config.atomic_replace") as replace:
            write_config(path, {"a": 1}, atomic=True)
        replace.assert_called_once_with(path, b'{\n  "a": 1\n}')


class TestEnsureObject:
    """Tests for ensure_object()."""

    def test_creates_missing(self):
        doc: dict = {}
        child = ensure_object(doc, "gateway")
        assert child == {}
        assert doc["gateway"] is child

    def test_replaces_null(self):
        doc = {"gateway": None}
        assert ensure_object(doc, "gateway") == {}
        assert doc == {"gateway": {}}

    def test_preserves_existing(self):
        doc = {"gateway": {"port": 18789}}
        child = ensure_object(doc, "gateway")
        assert child is doc["gateway"]
        assert child == {"port": 18789}

    @pytest.mark.parametrize("value", [5, "x", [1], True, False, 0, ""])
    def test_rejects_non_object(self, value):
        with pytest.raises(InvalidJsonError, match="'gateway.controlUi'"):
            ensure_object({"controlUi": value}, "controlUi", where="gateway")
