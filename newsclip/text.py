"""Paragraph reflow for OCR text: join hyphenated line splits, merge continuation lines."""
import re

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")
# Letter + hyphen at line end, continued in lowercase: one word broken in two.
_SPLIT_WORD = re.compile(r"(?<=[^\W\d_])-$")
# Any other hyphen glued to the line's last token ("1963-", "Korean-"): keep it.
_ATTACHED_HYPHEN = re.compile(r"(?<=\S)-$")


def _join_pair(joined: str, line: str) -> str:
    match (_SPLIT_WORD.search(joined), line[:1].islower(), _ATTACHED_HYPHEN.search(joined)):
        case (hyphen, True, _) if hyphen:
            return joined[: hyphen.start()] + line
        case (_, _, attached) if attached:
            return joined + line
        case _:
            return f"{joined} {line}"


def _join_lines(lines: list[str]) -> str:
    joined = ""
    for line in lines:
        joined = _join_pair(joined, line) if joined else line
    return joined


def reflow_paragraphs(raw: str) -> str:
    """Return ``raw`` as paragraphs separated by exactly one blank line, with no
    single newlines inside a paragraph."""
    normalized = raw.replace("\r\n", "\n").replace("\r", "\n").strip()
    paragraphs = (
        _join_lines([line.strip() for line in block.split("\n") if line.strip()])
        for block in _PARAGRAPH_BREAK.split(normalized)
    )
    return "\n\n".join(p for p in paragraphs if p)
