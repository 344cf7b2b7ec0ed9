"""Test transpose-chars (Ctrl-T)."""

from pagepad.model import PageModel


def create_model(width=10, height=5):
    return PageModel(width, height)


def type_text(model, text):
    for ch in text.encode('ascii'):
        model.insert(ch)


def row_text(model, row):
    return model.row(row).decode('ascii').rstrip()


def test_transpose_swaps_and_advances():
    model = create_model()
    type_text(model, "abc")
    model.point = 1
    model.transpose_chars()
    assert row_text(model, 0) == "bac"
    assert model.point == 2


def test_repeated_transpose_drags_char_forward():
    model = create_model()
    type_text(model, "abcd")
    model.point = 1
    model.transpose_chars()
    model.transpose_chars()
    model.transpose_chars()
    assert row_text(model, 0) == "bcda"


def test_transpose_at_page_start_is_noop_swap():
    model = create_model()
    type_text(model, "abc")
    model.point = 0
    model.transpose_chars()
    assert row_text(model, 0) == "abc"
    assert model.point == 1


def test_transpose_at_column_zero_swaps_with_previous_row():
    model = create_model()
    type_text(model, "abcdefghijxy")
    model.point = 10
    model.transpose_chars()
    assert row_text(model, 0) == "abcdefghix"
    assert row_text(model, 1) == "jy"
    assert model.point == 11
