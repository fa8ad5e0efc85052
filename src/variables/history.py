"""
History — Ограниченный временной ряд значений

Fixed-capacity FIFO из пар (time, value): при переполнении вытесняется
самая старая запись. Порядок timestamps не проверяется (out-of-order
timestamps принимаются без ошибки).
"""

import logging
from collections import deque
from typing import Any, Deque, Final, Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# Ёмкость истории по умолчанию
DEFAULT_HISTORY_CAPACITY: Final[int] = 64


class HistoryEntry(BaseModel):
    """Запись истории: значение и время его присваивания"""

    time: Any = Field(..., description="Timestamp присваивания")
    value: Any = Field(..., description="Присвоенное значение")

    model_config = {"frozen": True}

    def as_tuple(self) -> Tuple[Any, Any]:
        return (self.time, self.value)


class History:
    """
    Ограниченная история значений.

    Хранит не более capacity записей, от старой к новой.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        """
        Args:
            capacity: Максимальное число записей (> 0)

        Raises:
            ValueError: Если capacity <= 0
        """
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._entries: Deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        """Текущее число записей"""
        return len(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) == self._capacity

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> Optional[HistoryEntry]:
        return self._entries[-1] if self._entries else None

    def extend(self, time: Any, value: Any) -> None:
        """
        Добавление записи (time, value).

        При заполненной истории самая старая запись вытесняется.
        """
        if self.is_full:
            logger.debug("History full (capacity=%d), evicting oldest entry", self._capacity)
        self._entries.append(HistoryEntry(time=time, value=value))

    def clear(self) -> None:
        self._entries.clear()

    def times(self) -> List[Any]:
        return [entry.time for entry in self._entries]

    def values(self) -> List[Any]:
        return [entry.value for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))
