import threading
from collections import OrderedDict
from typing import Generic, List, Optional, TypeVar

from ..logger import get_logger

logger = get_logger("retrieval.cache")

T = TypeVar("T")


class ResultCache(Generic[T]):
    """
    Bounded query -> results map with FIFO eviction.

    Entries leave in insertion order; reads never refresh an entry. All
    access goes through one lock so concurrent misses cannot overfill it.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._data: "OrderedDict[str, List[T]]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def get(self, key: str) -> Optional[List[T]]:
        with self._lock:
            value = self._data.get(key)
            return list(value) if value is not None else None

    def put(self, key: str, value: List[T]) -> None:
        if self.capacity <= 0:
            return
        with self._lock:
            if key in self._data:
                # a racing miss for the same key; keep its original slot
                self._data[key] = list(value)
                return
            while len(self._data) >= self.capacity:
                evicted, _ = self._data.popitem(last=False)
                logger.debug(f"Evicted '{evicted}' from result cache")
            self._data[key] = list(value)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data.keys())
