import json

import pytest

from survey_api.services.storage import CorruptDataError
from survey_api.services.store import is_safe_name, question_set_path


class TestLocalStorage:

    def test_write_json_is_pretty_printed(self, storage, tmp_path):
        storage.write_json("a/b.json", {"k": [1, 2]})
        text = (tmp_path / "a" / "b.json").read_text(encoding="utf-8")
        assert text == json.dumps({"k": [1, 2]}, indent=4)

    def test_read_missing_file_raises(self, storage):
        with pytest.raises(FileNotFoundError):
            storage.read_json("nope.json")

    def test_list_dir_is_sorted(self, storage):
        storage.write_json("b.json", [])
        storage.write_json("a.json", [])
        assert storage.list_dir() == ["a.json", "b.json"]


class TestFileStore:

    def test_read_all_missing_file_is_empty(self, store):
        assert store.read_all() == []

    def test_append_returns_full_collection(self, store):
        store.append({"id": "1"})
        records = store.append({"id": "2"})
        assert [r["id"] for r in records] == ["1", "2"]
        assert store.read_all() == records

    def test_read_all_corrupt_file_propagates(self, store, tmp_path):
        (tmp_path / "survey.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            store.read_all()

    def test_append_to_corrupt_file_does_not_overwrite(self, store, tmp_path):
        (tmp_path / "survey.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            store.append({"id": "1"})
        assert (tmp_path / "survey.json").read_text(encoding="utf-8") == "{not json"

    @pytest.mark.parametrize("content", [b'{"a": 1}', b'[1, 2]', b'"text"'])
    def test_wrong_shape_collection_raises(self, store, tmp_path, content):
        (tmp_path / "survey.json").write_bytes(content)
        with pytest.raises(CorruptDataError):
            store.read_all()
        with pytest.raises(CorruptDataError):
            store.append({"id": "1"})
        assert (tmp_path / "survey.json").read_bytes() == content

    def test_invalid_utf8_raises(self, store, tmp_path):
        (tmp_path / "survey.json").write_bytes(b'["\xff"]')
        with pytest.raises(CorruptDataError):
            store.read_all()

    @pytest.mark.parametrize("content", [b'{"x": 1}', b'["ok", 3]'])
    def test_wrong_shape_questions_raises(self, store, tmp_path, content):
        (tmp_path / "question.json").write_bytes(content)
        with pytest.raises(CorruptDataError):
            store.read_questions()

    def test_read_by_path(self, store, storage):
        assert store.read_by_path("missing.json") is None
        storage.write_json("x.json", {"a": 1})
        assert store.read_by_path("x.json") == {"a": 1}

    def test_list_files(self, store, storage):
        storage.write_json("survey.json", [])
        store.write_question_set(["q"], "fruit", "alice")
        assert store.list_files() == ["alice", "survey.json"]

    def test_list_files_missing_dir_raises(self, tmp_path):
        from survey_api.services.storage import LocalStorage
        from survey_api.services.store import FileStore
        with pytest.raises(FileNotFoundError):
            FileStore(LocalStorage(tmp_path / "absent")).list_files()

    def test_read_questions(self, store, storage):
        assert store.read_questions() == []
        storage.write_json("question.json", ["one", "two"])
        assert store.read_questions() == ["one", "two"]

    def test_write_question_set_layout(self, store, tmp_path):
        written = store.write_question_set(["a", "b"], "fruit", "alice")
        on_disk = json.loads((tmp_path / "alice" / "fruit_question.json").read_text(encoding="utf-8"))
        assert on_disk == written
        assert written["surveyName"] == "fruit"
        assert written["questions"] == ["a", "b"]
        assert written["createTime"].endswith("Z")

    def test_write_question_set_overwrites(self, store):
        first = store.write_question_set(["a"], "fruit", "alice")
        second = store.write_question_set(["b", "c"], "fruit", "alice")
        assert second["id"] != first["id"]
        assert store.query_question_set("fruit", "alice") == second

    def test_query_question_set_missing(self, store):
        assert store.query_question_set("fruit", "bob") is None


@pytest.mark.parametrize("name,ok", [
    ("alice", True),
    ("fruit survey", True),
    ("v1.2", True),
    ("", False),
    (None, False),
    ("..", False),
    ("../etc", False),
    ("a/b", False),
    ("a\\b", False),
    (".hidden", False),
    ("alice\n", False),
])
def test_is_safe_name(name, ok):
    assert is_safe_name(name) is ok


def test_question_set_path():
    assert question_set_path("fruit", "alice") == "alice/fruit_question.json"
