"""CSV tokenizer for the spreadsheet export.

The export contains free-text answers (tasting notes, workflow descriptions)
that routinely hold commas and line breaks inside quoted cells, so rows are
split by a character scan rather than by lines.

Malformed input never raises: an unterminated quote at end of input simply
flushes whatever was collected for the last row.
"""

from __future__ import annotations


def tokenize(text: str) -> list[list[str]]:
    """Split CSV text into rows of trimmed field strings."""
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False

    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        if char == '"':
            if i + 1 < length and text[i + 1] == '"':
                field.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            row.append("".join(field).strip())
            field = []
        elif char == "\n" and not in_quotes:
            row.append("".join(field).strip())
            rows.append(row)
            row = []
            field = []
        elif char == "\r" and not in_quotes and i + 1 < length and text[i + 1] == "\n":
            # CRLF line ending; the newline branch closes the row.
            pass
        else:
            field.append(char)
        i += 1

    pending = "".join(field).strip()
    if pending or row:
        row.append(pending)
        rows.append(row)

    return rows
