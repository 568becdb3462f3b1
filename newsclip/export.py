"""Result export: BOM-prefixed CSV and the plain-text results table."""
import csv
import io

from newsclip.constants import (
    CSV_BOM,
    CSV_ENCODING,
    CSV_HEADER,
    MSG_NO_RESULTS,
    MSG_RESULT_ENTRY,
    MSG_RESULTS_ERRORS,
    MSG_RESULTS_HEADER,
)
from newsclip.models import AnalysisResult


def to_csv(results: list[AnalysisResult]) -> str:
    """Header line unquoted; every data field quoted with internal quotes doubled."""
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows((r.folder_name, r.file_name, r.text) for r in results)
    return buffer.getvalue()


def to_csv_bytes(results: list[AnalysisResult]) -> bytes:
    return (CSV_BOM + to_csv(results)).encode(CSV_ENCODING)


def render_table(results: list[AnalysisResult]) -> list[str]:
    """Header line followed by one entry per result."""
    match results:
        case []:
            return [MSG_NO_RESULTS]
        case _:
            pass

    header = MSG_RESULTS_HEADER % (sum(r.is_article for r in results), len(results))
    errors = sum(r.is_error for r in results)
    if errors:
        header += MSG_RESULTS_ERRORS % errors
    return [header] + [
        MSG_RESULT_ENTRY % (r.folder_name, r.file_name, r.title, r.text)
        for r in results
    ]


def chunk_messages(entries: list[str], limit: int) -> list[str]:
    """Pack entries into messages no longer than ``limit``, splitting oversized entries."""
    pieces = [
        entry[i:i + limit]
        for entry in entries
        for i in range(0, max(len(entry), 1), limit)
    ]
    messages: list[str] = []
    for piece in pieces:
        match messages:
            case [*_, last] if len(last) + 2 + len(piece) <= limit:
                messages[-1] = f"{last}\n\n{piece}"
            case _:
                messages.append(piece)
    return messages
