"""
CSV viewer API.
Parses delimited text into columns and rows and exports it back to CSV.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from api.exceptions import InvalidInputError, UnsupportedOptionError

DELIMITERS = [
    {"label": "Comma (,)", "value": ","},
    {"label": "Semicolon (;)", "value": ";"},
    {"label": "Tab", "value": "\t"},
    {"label": "Pipe (|)", "value": "|"},
    {"label": "Space", "value": " "},
]

QUOTE_CHARS = [
    {"label": 'Double Quote (")', "value": '"'},
    {"label": "Single Quote (')", "value": "'"},
    {"label": "None", "value": ""},
]

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


@dataclass
class CsvTable:
    """Parsed CSV data: column descriptors plus one dict per row keyed by field."""

    columns: List[Dict[str, str]] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.rows)

    @property
    def total_columns(self) -> int:
        return len(self.columns)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": self.columns,
            "rows": self.rows,
            "total_rows": self.total_rows,
            "total_columns": self.total_columns,
        }


def _check_options(delimiter: str, quote_char: Optional[str]) -> None:
    if delimiter not in [d["value"] for d in DELIMITERS]:
        raise UnsupportedOptionError(f"Unsupported delimiter: {delimiter!r}")
    if (quote_char or "") not in [q["value"] for q in QUOTE_CHARS]:
        raise UnsupportedOptionError(f"Unsupported quote character: {quote_char!r}")


def split_line(line: str, delimiter: str, quote_char: Optional[str]) -> List[str]:
    """Split one line, honouring quotes. A doubled quote inside quotes is a literal quote."""
    if not quote_char:
        return line.split(delimiter)

    values = []
    current = ""
    inside_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == quote_char:
            if inside_quotes and i + 1 < len(line) and line[i + 1] == quote_char:
                current += quote_char
                i += 1
            else:
                inside_quotes = not inside_quotes
        elif char == delimiter and not inside_quotes:
            values.append(current)
            current = ""
        else:
            current += char
        i += 1

    values.append(current)
    return values


def parse_lines(text: str, delimiter: str = ",", quote_char: Optional[str] = '"') -> List[List[str]]:
    """Split trimmed text into lines (CRLF, LF or CR) and tokenize each one."""
    text = text.strip()
    if not text:
        return []
    return [split_line(line, delimiter, quote_char) for line in _LINE_BREAK.split(text)]


def parse_csv(text: str, delimiter: str = ",", quote_char: Optional[str] = '"',
              has_header: bool = True) -> CsvTable:
    """Parse CSV text into a CsvTable."""
    _check_options(delimiter, quote_char)
    try:
        lines = parse_lines(text, delimiter, quote_char)
    except Exception as e:
        raise InvalidInputError(
            "Failed to parse CSV data. Please check the format and try again."
        ) from e

    if not lines:
        return CsvTable()

    if has_header:
        header_row = lines[0]
        fields = [header or f"col{index}" for index, header in enumerate(header_row)]
        columns = [
            {"field": fields[index], "header": header or f"Column {index + 1}"}
            for index, header in enumerate(header_row)
        ]
        rows = [
            {name: (line[j] if j < len(line) else "") for j, name in enumerate(fields)}
            for line in lines[1:]
        ]
        return CsvTable(columns=columns, rows=rows)

    column_count = max(len(line) for line in lines)
    columns = [{"field": f"col{i}", "header": f"Column {i + 1}"} for i in range(column_count)]
    rows = [
        {f"col{i}": (line[i] if i < len(line) else "") for i in range(column_count)}
        for line in lines
    ]
    return CsvTable(columns=columns, rows=rows)


def quote_value(value: Any, delimiter: str = ",", quote_char: Optional[str] = '"') -> str:
    """Quote a value when it contains the delimiter or the quote character."""
    text = "" if value is None else str(value)
    quote = quote_char or '"'
    if delimiter in text or quote in text:
        return quote + text.replace(quote, quote + quote) + quote
    return text


def export_csv(table: CsvTable, delimiter: str = ",", quote_char: Optional[str] = '"',
               include_header: bool = True) -> str:
    """Serialize a table back to CSV text, one newline-terminated line per row."""
    _check_options(delimiter, quote_char)
    if not table.rows:
        raise InvalidInputError("No data to export")

    lines = []
    if include_header:
        lines.append(delimiter.join(quote_value(col["header"], delimiter, quote_char)
                                    for col in table.columns))
    for row in table.rows:
        lines.append(delimiter.join(quote_value(row.get(col["field"], ""), delimiter, quote_char)
                                    for col in table.columns))
    return "".join(line + "\n" for line in lines)
