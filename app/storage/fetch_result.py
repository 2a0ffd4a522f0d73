# app/storage/fetch_result.py
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """
    Outcome of a read through the storage facade.

    `data` always holds something usable (the empty default on failure),
    `error` tells a failed fetch apart from a genuinely empty collection.
    """

    data: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
