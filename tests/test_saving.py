"""Test saving documents and the first-save backup."""

import os

import pytest

from pagepad.errors import FileError
from pagepad.model import PageModel
from pagepad.persistence import (
    backup_path, encode_document, load_bytes, save, snarf, write_backup,
)


def create_model(width=10, height=5, total_pages=8):
    return PageModel(width, height, total_pages)


def type_text(model, text):
    for ch in text.encode('ascii'):
        model.insert(ch)


def test_single_short_row_document():
    model = create_model()
    type_text(model, "hi")
    assert encode_document(model) == b"hi\n\f" + b"\n\f" * 7


def test_blank_document_writes_one_empty_row_per_page():
    model = create_model(total_pages=3)
    assert encode_document(model) == b"\n\f\n\f\n\f"


def test_inner_blank_rows_are_kept():
    model = create_model(total_pages=1)
    type_text(model, "ab")
    model.point = 20
    type_text(model, "cd  ")
    assert encode_document(model) == b"ab\n\ncd\n\f"


def test_content_on_later_page():
    model = create_model(total_pages=3)
    model.forward_page()
    type_text(model, "x")
    assert encode_document(model) == b"\n\fx\n\f\n\f"


def test_save_writes_file_and_resets_cursor(tmp_path):
    path = str(tmp_path / "doc.txt")
    model = create_model(total_pages=2)
    model.forward_page()
    type_text(model, "hi")

    save(model, path)

    with open(path, 'rb') as f:
        assert f.read() == b"\n\fhi\n\f"
    assert (model.page, model.point) == (0, 0)


def test_save_without_backup_leaves_no_backup(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"old\n")
    save(create_model(total_pages=1), str(path))
    assert not (tmp_path / "doc.txt~").exists()


def test_save_with_backup_copies_previous_content(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"old content\x00\xff\n")
    model = create_model(total_pages=1)
    type_text(model, "new")

    save(model, str(path), backup=True)

    assert (tmp_path / "doc.txt~").read_bytes() == b"old content\x00\xff\n"
    assert path.read_bytes() == b"new\n\f"


def test_backup_of_missing_file_is_skipped(tmp_path):
    path = str(tmp_path / "new.txt")
    assert write_backup(path) is None
    assert not os.path.exists(path + "~")


def test_backup_suffix(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"x")
    target = write_backup(str(path), ".bak")
    assert target == str(path) + ".bak"
    assert backup_path(str(path), ".bak") == target
    assert (tmp_path / "doc.txt.bak").read_bytes() == b"x"


def test_unreadable_source_is_reported_as_read_error(tmp_path):
    path = tmp_path / "doc.txt"
    path.mkdir()
    with pytest.raises(FileError) as excinfo:
        write_backup(str(path))
    assert excinfo.value.path == str(path)
    assert "Cannot read" in str(excinfo.value)
    assert not (tmp_path / "doc.txt~").exists()


def test_unwritable_backup_is_reported_against_backup_path(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"x")
    (tmp_path / "doc.txt~").mkdir()
    with pytest.raises(FileError) as excinfo:
        write_backup(str(path))
    assert excinfo.value.path == str(path) + "~"
    assert "Cannot write backup" in str(excinfo.value)


def test_save_keeps_file_mode(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"x")
    os.chmod(path, 0o640)
    save(create_model(total_pages=1), str(path))
    assert os.stat(path).st_mode & 0o777 == 0o640


def test_save_to_missing_directory_raises_file_error(tmp_path):
    path = str(tmp_path / "missing" / "doc.txt")
    with pytest.raises(FileError) as excinfo:
        save(create_model(), path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "Cannot write" in str(excinfo.value)


def test_failed_save_leaves_no_temp_files(tmp_path):
    target = tmp_path / "doc.txt"
    target.mkdir()  # a directory cannot be replaced by a file
    with pytest.raises(FileError):
        save(create_model(), str(target))
    assert [p.name for p in tmp_path.iterdir()] == ["doc.txt"]


def test_round_trip(tmp_path):
    path = str(tmp_path / "doc.txt")
    model = create_model()
    type_text(model, "first")
    model.point = 20
    type_text(model, " indented")
    model.forward_page()
    type_text(model, "page 2")
    model.page = 7
    model.point = 40
    type_text(model, "bottom")

    save(model, path)
    loaded = create_model()
    assert snarf(loaded, path) is True

    for page in range(8):
        assert loaded.lines(page) == model.lines(page)


def test_full_width_rows_survive_repeated_load_and_save():
    data = b"abcdefghij\nx\n\f"
    outputs = []
    for _ in range(3):
        model = create_model(total_pages=1)
        load_bytes(model, data)
        data = encode_document(model)
        outputs.append(data)
    assert outputs == [b"abcdefghij\nx\n\f"] * 3


def test_full_width_row_keeps_the_blank_row_after_it():
    model = create_model(total_pages=1)
    load_bytes(model, b"abcdefghij\n\nx\n\f")
    assert encode_document(model) == b"abcdefghij\n\nx\n\f"


def test_full_width_bottom_row_round_trips():
    model = create_model(total_pages=1)
    data = b"a\n\n\n\n" + b"0123456789" + b"\n\f"
    load_bytes(model, data)
    assert model.row(4) == b"0123456789"
    assert encode_document(model) == data


def test_round_trip_of_saved_file_is_stable(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"one\n\tx\nthree\n\fpage two\n")
    model = create_model()
    snarf(model, str(path))
    save(model, str(path))
    first = path.read_bytes()

    again = create_model()
    snarf(again, str(path))
    save(again, str(path))
    assert path.read_bytes() == first
