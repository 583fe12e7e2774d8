"""Table-level read/write helpers over the Supabase client.

Every helper converts client, network and decoding errors into RemoteFailure
so callers only ever have to handle one exception type.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from customer_app.database.client import SupabaseClient
from customer_app.errors import RemoteFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode(rows: List[Dict[str, Any]], model: Optional[Type[ModelT]]) -> List[Any]:
    if model is None:
        return list(rows)
    return [model.model_validate(row) for row in rows]


def _apply_filters(query, filters: Optional[Mapping[str, Any]]):
    for column, value in (filters or {}).items():
        if value is None:
            query = query.is_(column, "null")
        else:
            query = query.eq(column, value)
    return query


async def select_rows(
    table: str,
    columns: str = "*",
    filters: Optional[Mapping[str, Any]] = None,
    order_by: Optional[str] = None,
    desc: bool = False,
    model: Optional[Type[ModelT]] = None,
    limit: Optional[int] = None,
    or_filter: Optional[str] = None,
) -> List[Any]:
    """
    Read rows from a table.

    Args:
        table: Table name (e.g. "bookings")
        columns: PostgREST column list, embedded relations allowed
        filters: Column equality predicates; None matches SQL NULL
        order_by: Column to order by
        desc: Descending order when True
        model: Pydantic model each row is decoded into
        limit: Maximum number of rows
        or_filter: Raw PostgREST "or" expression, e.g. "a.eq.1,b.eq.1"

    Returns:
        Rows in the order the backend returned them
    """
    try:
        client = SupabaseClient.get_client()
        query = _apply_filters(client.table(table).select(columns), filters)
        if or_filter:
            query = query.or_(or_filter)
        if order_by:
            query = query.order(order_by, desc=desc)
        if limit is not None:
            query = query.limit(limit)
        result = query.execute()
        return _decode(result.data or [], model)
    except Exception as e:
        logger.error(f"Error selecting from {table}: {e}")
        raise RemoteFailure.from_exception(e) from e


async def select_one(
    table: str,
    columns: str = "*",
    filters: Optional[Mapping[str, Any]] = None,
    model: Optional[Type[ModelT]] = None,
) -> Optional[Any]:
    """Read the first matching row, or None"""
    rows = await select_rows(table, columns, filters=filters, model=model, limit=1)
    return rows[0] if rows else None


async def insert_row(
    table: str,
    record: BaseModel,
    model: Optional[Type[ModelT]] = None,
) -> Any:
    """Insert one record and return the created row"""
    payload = record.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        client = SupabaseClient.get_client()
        result = client.table(table).insert(payload).execute()
        if not result.data:
            raise RemoteFailure(f"Insert into {table} returned no row")
        return _decode(result.data[:1], model)[0]
    except RemoteFailure:
        raise
    except Exception as e:
        logger.error(f"Error inserting into {table}: {e}")
        raise RemoteFailure.from_exception(e) from e


async def update_rows(
    table: str,
    values: Mapping[str, Any],
    filters: Mapping[str, Any],
) -> List[Dict[str, Any]]:
    """Update matching rows and return them"""
    try:
        client = SupabaseClient.get_client()
        query = _apply_filters(client.table(table).update(dict(values)), filters)
        result = query.execute()
        return result.data or []
    except Exception as e:
        logger.error(f"Error updating {table}: {e}")
        raise RemoteFailure.from_exception(e) from e
