"""Front-matter slicing and key/value field extraction"""

from typing import Optional

from rstpub.core.models import FrontMatter


DELIMITER = "---"

# Recognized front-matter keys and the FrontMatter field each one sets.
SCALAR_FIELDS: dict[str, str] = {
    "title":       "title",
    "date":        "date",
    "author":      "author",
    "snippet_id":  "snippet_id",
    "github_url":  "github_url",
    "demo_url":    "demo_url",
    "description": "description",
    "cover_image": "cover_image",
}
LIST_FIELDS: dict[str, str] = {
    "tags": "tags",
}


def _unquote(value: str) -> str:
    """Strip one pair of surrounding double quotes, if present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def _parse_list(value: str) -> tuple[str, ...]:
    """Parse `[a, "b", c]` into ('a', 'b', 'c'); empty items are dropped."""
    if value.startswith("["):
        value = value[1:]
    if value.endswith("]"):
        value = value[:-1]
    items = (_unquote(item.strip()) for item in value.split(","))
    return tuple(item for item in items if item)


def split_lines(text: str) -> list[str]:
    """Split on line feeds only; a trailing carriage return is dropped from each line
    and a final line feed does not produce an empty last line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_frontmatter(lines: list[str]) -> tuple[str, Optional[int]]:
    """Return (frontmatter_text, end_index) for a list of document lines.

    The first line that strips to `---` opens the header and the next one
    closes it; lines in between are joined verbatim, newline-terminated.
    A header that is never closed keeps everything after the opener and
    reports an end index of 0. Returns ("", None) when there is no opener.
    """
    opened = False
    buffer: list[str] = []
    for i, line in enumerate(lines):
        if line.strip() == DELIMITER:
            if opened:
                return "".join(buffer), i
            opened = True
            continue
        if opened:
            buffer.append(line + "\n")
    if opened:
        return "".join(buffer), 0
    return "", None


def parse_frontmatter(text: str) -> FrontMatter:
    """Extract recognized `key: value` fields; unknown keys and other lines are ignored."""
    fields: dict[str, object] = {}
    for line in split_lines(text):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key, value = key.strip(), value.strip()
        if key in SCALAR_FIELDS:
            fields[SCALAR_FIELDS[key]] = _unquote(value)
        elif key in LIST_FIELDS:
            fields[LIST_FIELDS[key]] = _parse_list(value)
    return FrontMatter(**fields)
