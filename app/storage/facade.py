# app/storage/facade.py
"""
Shared plumbing for the storage facade.

Reads log and degrade to an empty default; mutations log and re-raise.
Records are validated one at a time: a malformed record is logged and
skipped, the rest of the collection is kept.
The clinic client is blocking, so every call runs in a worker thread.
"""
import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.storage.fetch_result import FetchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def _validate_record(label: str, model: Type[M], raw: Any) -> Optional[M]:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        record_id = raw.get("id") if isinstance(raw, dict) else None
        logger.warning(f"⚠️  Skipping malformed {label} record {record_id!r}: {e}")
        return None


def parse_list(label: str, model: Type[M], raw: Any) -> List[M]:
    if not isinstance(raw, list):
        raise TypeError(f"expected a list of {label}, got {type(raw).__name__}")
    records = (_validate_record(label, model, item) for item in raw)
    return [record for record in records if record is not None]


def parse_mapping(label: str, model: Type[M], raw: Any) -> Dict[str, M]:
    if not isinstance(raw, dict):
        raise TypeError(f"expected a mapping of {label}, got {type(raw).__name__}")
    parsed = {}
    for key, item in raw.items():
        record = _validate_record(label, model, item)
        if record is not None:
            parsed[str(key)] = record
    return parsed


async def fetch_collection(
    label: str,
    call: Callable[[], Any],
    parse: Callable[[Any], T],
    empty: Callable[[], T],
) -> FetchResult[T]:
    try:
        raw = await asyncio.to_thread(call)
        return FetchResult(data=parse(raw))
    except Exception as e:
        logger.error(f"Error fetching {label}: {e}")
        return FetchResult(data=empty(), error=str(e))


async def fetch_list(label: str, call: Callable[[], Any], model: Type[M]) -> FetchResult[List[M]]:
    return await fetch_collection(label, call, lambda raw: parse_list(label, model, raw), list)


async def fetch_mapping(
    label: str, call: Callable[[], Any], model: Type[M]
) -> FetchResult[Dict[str, M]]:
    return await fetch_collection(label, call, lambda raw: parse_mapping(label, model, raw), dict)


async def run_mutation(label: str, call: Callable[..., Any], *args: Any) -> Any:
    try:
        return await asyncio.to_thread(call, *args)
    except Exception as e:
        logger.error(f"Error {label}: {e}")
        raise
