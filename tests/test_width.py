from __future__ import annotations

from commitm.width import display_width, ljust_width, max_width, rjust_width


def test_single_width_text_counts_code_points() -> None:
    text = "acme/widgets-1.0"
    assert display_width(text) == len(text)


def test_wide_glyphs_count_double() -> None:
    assert display_width("日本語") == 6
    assert display_width("ＡＢ") == 4
    assert display_width("日本/ツール") == 11


def test_combining_marks_take_no_columns() -> None:
    assert display_width("e\u0301") == 1


def test_padding_uses_display_width() -> None:
    padded = ljust_width("日本", 6)

    assert padded == "日本  "
    assert display_width(padded) == 6
    assert rjust_width("ab", 4) == "  ab"


def test_padding_never_truncates() -> None:
    assert ljust_width("repository", 4) == "repository"


def test_max_width_of_empty_sequence() -> None:
    assert max_width([]) == 0
    assert max_width(["a", "日本"]) == 4
