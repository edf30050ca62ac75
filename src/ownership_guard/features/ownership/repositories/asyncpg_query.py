"""AsyncPG ownership data source.

Pushes the ownership lookup down to PostgreSQL as one parameterised
statement, so existence and ownership are answered in a single round trip.
Database errors propagate unchanged to the caller.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..entities.lookup import OwnershipLookup
from ..entities.protocols import OwnershipQuery
from ..utils.queries import (
    OWNERSHIP_LOOKUP,
    SCOPED_SELECT,
    build_equals_clauses,
    build_relation,
)
from ..utils.validation import validate_identifier, validate_required

logger = logging.getLogger(__name__)


class AsyncPGOwnershipQuery(OwnershipQuery):
    """Ownership data source over a PostgreSQL table.

    ``executor`` is an asyncpg ``Connection`` or ``Pool``; anything exposing
    ``fetchrow`` and ``fetch`` coroutines works.
    """

    def __init__(
        self,
        executor: Any,
        table: str,
        schema: str = "public",
        casts: Optional[Dict[str, str]] = None,
        filters: Tuple[Tuple[str, Any], ...] = (),
    ):
        self.executor = validate_required(executor, "executor")
        self.table = validate_identifier(table, "table name")
        self.schema = validate_identifier(schema, "schema name")
        self.casts = dict(casts or {})
        for column, cast in self.casts.items():
            validate_identifier(column, "column name")
            validate_identifier(cast, "cast type")
        self._filters = filters

    @property
    def relation(self) -> str:
        return build_relation(self.schema, self.table)

    @property
    def filters(self) -> Tuple[Tuple[str, Any], ...]:
        return self._filters

    def where_equals(self, column: str, value: Any) -> "AsyncPGOwnershipQuery":
        """Return a new source whose lookups also require ``column = value``."""
        validate_identifier(column, "column name")
        return AsyncPGOwnershipQuery(
            self.executor,
            self.table,
            schema=self.schema,
            casts=self.casts,
            filters=self._filters + ((column, value),),
        )

    def where_owned_by(self, user_id: str, owner_column: str) -> "AsyncPGOwnershipQuery":
        return self.where_equals(owner_column, user_id)

    def where_tenant(self, tenant_id: str, tenant_column: str) -> "AsyncPGOwnershipQuery":
        return self.where_equals(tenant_column, tenant_id)

    def build_lookup_sql(self, lookup: OwnershipLookup) -> Tuple[str, List[Any]]:
        """Render the lookup as SQL plus positional arguments.

        Parameter order: id, projected values, then scope filter values.
        """
        id_column = validate_identifier(lookup.id_field, "column name")
        projected = [validate_identifier(name, "column name") for name in lookup.fields]
        scoped = [name for name, _ in self._filters]

        (id_clause,) = build_equals_clauses([id_column], 1, self.casts)
        projection_clauses = build_equals_clauses(projected, 2, self.casts)
        scope_clauses = build_equals_clauses(scoped, 2 + len(projected), self.casts)

        query = OWNERSHIP_LOOKUP.format(
            projection=" AND ".join(projection_clauses),
            relation=self.relation,
            predicate=" AND ".join((id_clause,) + scope_clauses),
        )
        args = [lookup.id_value, *lookup.expected_values, *(value for _, value in self._filters)]
        return query, args

    async def first_match(self, lookup: OwnershipLookup) -> Optional[bool]:
        query, args = self.build_lookup_sql(lookup)
        row = await self.executor.fetchrow(query, *args)
        if row is None:
            return None
        return bool(row["allowed"])

    async def fetch_all(self) -> List[Any]:
        """Fetch every row visible through the current scope."""
        clauses = build_equals_clauses([name for name, _ in self._filters], 1, self.casts)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        query = SCOPED_SELECT.format(relation=self.relation, where=where)
        return await self.executor.fetch(query, *(value for _, value in self._filters))
