from encore_assets.misc.utils import file_content, non_empty


def test_file_content(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("content", encoding="utf-8")

    assert file_content(str(path)) == "content"


def test_file_content_of_missing_file(tmp_path):
    assert file_content(str(tmp_path / "missing.txt")) is None
    assert file_content(None) is None


def test_file_content_of_directory(tmp_path):
    assert file_content(str(tmp_path)) is None


def test_non_empty():
    assert non_empty("value") == "value"
    assert non_empty("  ") is None
    assert non_empty("") is None
    assert non_empty(None) is None
