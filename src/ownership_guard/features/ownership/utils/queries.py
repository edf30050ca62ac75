"""SQL templates for the asyncpg ownership data source."""

from typing import Dict, Optional, Sequence, Tuple

# Single-row tri-state projection: no row -> absent, else true/false
OWNERSHIP_LOOKUP = """
    SELECT COALESCE({projection}, false) AS allowed
    FROM {relation}
    WHERE {predicate}
    LIMIT 1
"""

SCOPED_SELECT = """
    SELECT *
    FROM {relation}
    {where}
"""


def quote_identifier(identifier: str) -> str:
    """Double-quote an already validated identifier."""
    return f'"{identifier}"'


def build_relation(schema: str, table: str) -> str:
    return f"{quote_identifier(schema)}.{quote_identifier(table)}"


def build_equals_clauses(
    columns: Sequence[str],
    first_param: int,
    casts: Optional[Dict[str, str]] = None,
) -> Tuple[str, ...]:
    """Build ``"col" = $n`` clauses numbered from ``first_param``."""
    casts = casts or {}
    clauses = []
    for offset, column in enumerate(columns):
        placeholder = f"${first_param + offset}"
        if column in casts:
            placeholder = f"{placeholder}::{casts[column]}"
        clauses.append(f"{quote_identifier(column)} = {placeholder}")
    return tuple(clauses)
