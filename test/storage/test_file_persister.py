"""Tests for FilePersister and output directory resolution."""

import json
import os

import pytest

from yapi_extractor.exceptions import ConfigurationError, PersistenceError
from yapi_extractor.storage.file_persister import FilePersister, resolve_output_dir

TYPES = "export interface Response {\n  /** business code */\n  code: number;\n}\n"


class TestResolveOutputDir:
    def test_absolute_path_is_used_as_is(self, tmp_path):
        target = tmp_path / "out"

        assert resolve_output_dir(str(target), "/somewhere/else") == target

    def test_relative_path_is_joined_to_anchor(self, tmp_path):
        assert resolve_output_dir("mock", tmp_path) == (tmp_path / "mock").resolve()

    def test_relative_path_ignores_working_directory(self, tmp_path, monkeypatch):
        anchor = tmp_path / "project"
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)

        resolved = resolve_output_dir("generated/mock", anchor)

        assert resolved == (anchor / "generated" / "mock").resolve()
        assert os.getcwd() == str(elsewhere)


class TestPersist:
    def test_writes_both_files(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path / "mock"))

        written = persister.persist("9769", mock_data='{"code":0,"msg":"ok"}', type_definitions=TYPES)

        mock_file = tmp_path / "mock" / "9769-mock.json"
        types_file = tmp_path / "mock" / "9769-types.ts"
        assert written == [mock_file, types_file]
        assert mock_file.read_text(encoding="utf-8") == '{\n  "code": 0,\n  "msg": "ok"\n}'
        assert types_file.read_text(encoding="utf-8") == TYPES

    def test_only_mock_data_writes_one_file(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path))

        persister.persist("9769", mock_data='{"a": [1, 2]}')

        assert sorted(p.name for p in tmp_path.iterdir()) == ["9769-mock.json"]

    def test_only_type_definitions_writes_one_file(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path))

        persister.persist("9769", type_definitions=TYPES)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["9769-types.ts"]

    def test_creates_missing_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        persister = FilePersister(output_dir=str(target))

        persister.persist("1", mock_data="{}")

        assert (target / "1-mock.json").exists()

    def test_relative_output_dir_lands_under_anchor(self, tmp_path, monkeypatch):
        anchor = tmp_path / "project"
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        persister = FilePersister(output_dir="mock", anchor=anchor)

        persister.persist("9769", mock_data="{}")

        assert (anchor / "mock" / "9769-mock.json").exists()
        assert not (elsewhere / "mock").exists()

    def test_unicode_is_written_unescaped(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path))

        persister.persist("9769", mock_data='{"name": "订单"}')

        content = (tmp_path / "9769-mock.json").read_text(encoding="utf-8")
        assert "订单" in content
        assert json.loads(content) == {"name": "订单"}

    def test_overwrites_previous_files(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path))

        persister.persist("9769", mock_data='{"v": 1}')
        persister.persist("9769", mock_data='{"v": 2}')

        assert json.loads((tmp_path / "9769-mock.json").read_text(encoding="utf-8")) == {"v": 2}

    def test_nothing_to_write(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path / "mock"))

        assert persister.persist("9769") == []

    def test_invalid_mock_json_is_persistence_error(self, tmp_path):
        persister = FilePersister(output_dir=str(tmp_path))

        with pytest.raises(PersistenceError) as exc_info:
            persister.persist("9769", mock_data="{broken", type_definitions=TYPES)

        assert exc_info.value.code == "INVALID_MOCK_DATA"
        assert list(tmp_path.iterdir()) == []

    def test_missing_output_dir_is_configuration_error(self):
        persister = FilePersister(output_dir=None)

        with pytest.raises(ConfigurationError):
            persister.persist("9769", mock_data="{}")

    def test_unwritable_target_is_persistence_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")
        persister = FilePersister(output_dir=str(blocker / "mock"))

        with pytest.raises(PersistenceError):
            persister.persist("9769", mock_data="{}")


class TestInterfaceIdAsFileName:
    @pytest.mark.parametrize("interface_id", ["../escaped", "nested/9769", "..\\escaped", "/etc/9769", ".."])
    def test_rejects_ids_leaving_output_dir(self, tmp_path, interface_id):
        out = tmp_path / "out"
        persister = FilePersister(output_dir=str(out))

        with pytest.raises(PersistenceError) as exc_info:
            persister.persist(interface_id, mock_data='{"a": 1}', type_definitions=TYPES)

        assert exc_info.value.code == "INVALID_INTERFACE_ID"
        assert not (tmp_path / "escaped-types.ts").exists()
        assert not (tmp_path / "escaped-mock.json").exists()
        assert not out.exists()

    def test_plain_id_stays_inside_output_dir(self, tmp_path):
        out = tmp_path / "out"

        written = FilePersister(output_dir=str(out)).persist("9769", type_definitions=TYPES)

        assert [path.parent for path in written] == [out]


def test_home_relative_path_is_joined_to_anchor(tmp_path):
    assert resolve_output_dir("~/mock", tmp_path) == (tmp_path / "~" / "mock").resolve()
