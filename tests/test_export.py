"""CSV export and results-table rendering."""
import csv
import io

from newsclip.constants import CSV_FILENAME, MSG_NO_RESULTS, UPLOAD_FOLDER_NAME
from newsclip.export import chunk_messages, render_table, to_csv, to_csv_bytes
from newsclip.models import AnalysisResult


def make_result(file_name: str = "page.jpg", title: str = "Paik", text: str = "body") -> AnalysisResult:
    return AnalysisResult(
        folder_name=UPLOAD_FOLDER_NAME, file_name=file_name, title=title, text=text
    )


def parse_csv(data: bytes) -> list[list[str]]:
    return list(csv.reader(io.StringIO(data.decode("utf-8-sig"))))


# ── CSV ───────────────────────────────────────────────────────────────────────


def test_csv_header_line():
    assert to_csv([]).splitlines()[0] == "Folder Name,File Name,Text"


def test_csv_fields_are_quoted_and_quotes_doubled():
    row = to_csv([make_result(text='He said "TV is art".')]).splitlines()[1]

    assert row == '"Uploaded Articles","page.jpg","He said ""TV is art""."'


def test_csv_text_with_quotes_round_trips():
    text = 'The "father of video art" spoke.\n\nA "second" paragraph, with commas.'

    rows = parse_csv(to_csv_bytes([make_result(text=text)]))

    assert rows[1] == [UPLOAD_FOLDER_NAME, "page.jpg", text]


def test_csv_bytes_start_with_utf8_bom():
    assert to_csv_bytes([make_result()]).startswith(b"\xef\xbb\xbf")


def test_csv_keeps_non_ascii_text():
    rows = parse_csv(to_csv_bytes([make_result(text="백남준 — 비디오 아트")]))

    assert rows[1][2] == "백남준 — 비디오 아트"


def test_csv_omits_title_column():
    rows = parse_csv(to_csv_bytes([make_result(title="Hidden", text="shown")]))

    assert all(len(row) == 3 for row in rows)
    assert "Hidden" not in rows[1]


def test_csv_filename():
    assert CSV_FILENAME.endswith(".csv")


# ── results table ─────────────────────────────────────────────────────────────


def test_render_table_empty():
    assert render_table([]) == [MSG_NO_RESULTS]


def test_render_table_one_entry_per_result_with_counts():
    results = [
        make_result("a.jpg", "TV Garden", "plants and screens"),
        make_result("b.jpg", "No relevant article found", "No relevant article found."),
        make_result("c.jpg", "Error", "Error: Failed to get a response from the AI model."),
    ]

    entries = render_table(results)

    assert len(entries) == 4
    assert "1 article(s) found in 3 image(s)" in entries[0]
    assert "1 error(s)" in entries[0]
    assert "a.jpg" in entries[1] and "TV Garden" in entries[1]


def test_render_table_without_errors_has_no_error_suffix():
    entries = render_table([make_result()])

    assert "error" not in entries[0]


# ── chunking ──────────────────────────────────────────────────────────────────


def test_chunk_messages_packs_short_entries_together():
    assert chunk_messages(["a", "b", "c"], limit=100) == ["a\n\nb\n\nc"]


def test_chunk_messages_respects_limit():
    messages = chunk_messages(["x" * 30, "y" * 30, "z" * 30], limit=64)

    assert messages == ["x" * 30 + "\n\n" + "y" * 30, "z" * 30]
    assert all(len(m) <= 64 for m in messages)


def test_chunk_messages_splits_oversized_entry():
    messages = chunk_messages(["w" * 250], limit=100)

    assert [len(m) for m in messages] == [100, 100, 50]
