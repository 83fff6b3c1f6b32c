"""
SQL formatter API built on sqlparse.
"""

from typing import Dict, List, Union

import sqlparse
from sqlparse.exceptions import SQLParseError

from api.exceptions import InvalidInputError, UnsupportedOptionError

LANGUAGES: List[Dict[str, str]] = [
    {"label": "Standard SQL", "value": "sql"},
    {"label": "MySQL", "value": "mysql"},
    {"label": "PostgreSQL", "value": "postgresql"},
    {"label": "SQLite", "value": "sqlite"},
    {"label": "MariaDB", "value": "mariadb"},
    {"label": "BigQuery", "value": "bigquery"},
]

# 0 means one tab
INDENTATIONS: List[Dict[str, Union[str, int]]] = [
    {"label": "2 Spaces", "value": 2},
    {"label": "4 Spaces", "value": 4},
    {"label": "1 Tab", "value": 0},
]

LINES_BETWEEN_QUERIES = 2


def format_sql(sql: str, language: str = 'sql', indent: int = 2) -> str:
    """Pretty-print SQL with upper-case keywords, one statement block per query."""
    if language not in [lang["value"] for lang in LANGUAGES]:
        raise UnsupportedOptionError(f"Unsupported SQL language: {language}")
    if indent not in [opt["value"] for opt in INDENTATIONS]:
        raise UnsupportedOptionError(f"Unsupported indentation: {indent}")

    if not sql.strip():
        return ''

    options = {
        'reindent': True,
        'keyword_case': 'upper',
        'indent_tabs': indent == 0,
        'indent_width': 1 if indent == 0 else indent,
        'strip_comments': False,
    }

    try:
        statements = [
            sqlparse.format(statement, **options).strip()
            for statement in sqlparse.split(sql)
            if statement.strip()
        ]
    except SQLParseError as e:
        raise InvalidInputError(f"SQL formatting failed: {e}")

    return ('\n' * (LINES_BETWEEN_QUERIES + 1)).join(statements)


def error_output(sql: str, error: Union[str, Exception]) -> str:
    """Return the input prefixed by the formatting error as SQL comments."""
    return f"-- Error formatting SQL:\n-- {error}\n\n{sql}"
