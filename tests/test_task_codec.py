# tests/test_task_codec.py

from __future__ import annotations

from taskdesk.tasks.task_codec import decode_task, encode_task, make_task_id, sanitize_title, trim_text
from taskdesk.tasks.task_models import NO_DESCRIPTION, UNTITLED_TASK, DecodeMode


def test_decode_title_and_multiline_description() -> None:
    task = decode_task("Buy milk\n2%\nsemi-skimmed\n\n", task_id="1_buy_milk")

    assert task.id == "1_buy_milk"
    assert task.filename == "1_buy_milk.txt"
    assert task.title == "Buy milk"
    assert task.description == "2%\nsemi-skimmed"


def test_title_only_file_uses_context_specific_description_default() -> None:
    display = decode_task("Buy milk", task_id="x")
    edit = decode_task("Buy milk", task_id="x", mode=DecodeMode.EDIT)

    assert display.description == NO_DESCRIPTION
    assert edit.description == ""
    assert edit.title == display.title == "Buy milk"


def test_empty_file_decodes_to_placeholders() -> None:
    task = decode_task("", task_id="x")

    assert task.title == UNTITLED_TASK
    assert task.description == NO_DESCRIPTION


def test_whitespace_only_description_counts_as_missing() -> None:
    task = decode_task("Title\n   \n\t\n", task_id="x", mode=DecodeMode.EDIT)
    assert task.description == ""


def test_encode_joins_title_and_description_with_newline() -> None:
    assert encode_task("Buy milk", "2%") == "Buy milk\n2%"
    assert encode_task("Buy milk", None) == "Buy milk\n"
    assert encode_task("Buy milk", "") == "Buy milk\n"


def test_newline_in_title_is_not_escaped() -> None:
    raw = encode_task("first\nsecond", "desc")
    task = decode_task(raw, task_id="x")

    assert task.title == "first"
    assert task.description == "second\ndesc"


def test_sanitize_title_replaces_non_alphanumerics_and_lowercases() -> None:
    assert sanitize_title("Buy Milk!") == "buy_milk_"
    assert sanitize_title("Café 2%") == "caf__2_"
    assert sanitize_title("  x  ") == "__x__"


def test_make_task_id_uses_millisecond_timestamp_prefix() -> None:
    assert make_task_id("Buy milk", 1700000000.5) == "1700000000500_buy_milk"


def test_trim_text_strips_bom_and_unicode_spaces_but_keeps_separators() -> None:
    assert trim_text("\ufeff Title \u3000") == "Title"
    assert trim_text("\u2028x\u2029") == "x"
    assert trim_text("\x1cx\x1f") == "\x1cx\x1f"


def test_bom_only_description_counts_as_missing() -> None:
    assert decode_task("Title\n\ufeff", task_id="x").description == NO_DESCRIPTION
