"""Paragraph reflow of raw OCR text."""
from newsclip.constants import NOT_FOUND_TEXT
from newsclip.text import reflow_paragraphs


def test_hyphenated_line_split_is_joined():
    assert reflow_paragraphs("an inte-\nllectual artist") == "an intellectual artist"


def test_continuation_lines_are_merged_with_a_space():
    raw = "Nam June Paik opened\nhis first exhibition\nin Wuppertal."

    assert reflow_paragraphs(raw) == "Nam June Paik opened his first exhibition in Wuppertal."


def test_paragraphs_keep_exactly_one_blank_line():
    raw = (
        "The video artist was an inte-\n"
        "llectual force.\n"
        "\n"
        "Critics were\n"
        "divided."
    )

    result = reflow_paragraphs(raw)

    assert result == "The video artist was an intellectual force.\n\nCritics were divided."
    assert "\n\n\n" not in result
    assert all("\n" not in p for p in result.split("\n\n"))


def test_extra_blank_lines_collapse_to_one():
    assert reflow_paragraphs("first\n\n\n  \n\nsecond") == "first\n\nsecond"


def test_windows_line_endings_are_normalized():
    assert reflow_paragraphs("one\r\ntwo\r\n\r\nthree") == "one two\n\nthree"


def test_dash_after_space_is_not_a_word_split():
    assert reflow_paragraphs("pioneers -\nand critics") == "pioneers - and critics"


def test_sentinel_text_is_unchanged():
    assert reflow_paragraphs(NOT_FOUND_TEXT) == NOT_FOUND_TEXT


def test_empty_input_stays_empty():
    assert reflow_paragraphs("  \n \n") == ""


def test_year_range_split_across_lines_keeps_hyphen():
    assert reflow_paragraphs("from 1963-\n1964 onward") == "from 1963-1964 onward"


def test_numbered_range_keeps_both_numbers():
    assert reflow_paragraphs("pages 12-\n14 of the catalogue") == "pages 12-14 of the catalogue"


def test_hyphen_before_capitalised_line_is_kept():
    assert reflow_paragraphs("the Korean-\nAmerican artist") == "the Korean-American artist"
