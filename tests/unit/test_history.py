"""
Тесты History

Проверяет:
1. Ёмкость и вытеснение самой старой записи
2. Порядок записей (от старой к новой)
3. Out-of-order timestamps
4. Валидацию capacity
"""

import pytest
from pydantic import ValidationError

from src.variables.history import DEFAULT_HISTORY_CAPACITY, History, HistoryEntry


class TestHistory:
    """Тесты History"""

    def test_capacity_one(self) -> None:
        """capacity=1: вторая запись вытесняет первую"""
        history = History(capacity=1)

        assert history.count == 0

        history.extend(0, 0)
        assert history.count == 1

        history.extend(0, 1)
        assert history.count == 1
        assert history.values() == [1]

    def test_eviction_keeps_newest(self) -> None:
        """При переполнении остаются capacity новейших записей"""
        history = History(capacity=3)

        for t in range(5):
            history.extend(t, t * 10)

        assert history.is_full
        assert len(history) == 3
        assert [entry.as_tuple() for entry in history] == [(2, 20), (3, 30), (4, 40)]
        assert history.latest == HistoryEntry(time=4, value=40)

    def test_out_of_order_timestamps_accepted(self) -> None:
        """Монотонность времени не проверяется"""
        history = History(capacity=4)

        history.extend(5, "a")
        history.extend(1, "b")

        assert history.times() == [5, 1]

    def test_empty(self) -> None:
        """Пустая история"""
        history = History(capacity=2)

        assert history.latest is None
        assert not history.is_full
        assert history.entries == ()

    def test_clear(self) -> None:
        """clear удаляет все записи, capacity сохраняется"""
        history = History(capacity=2)
        history.extend(1, 1)

        history.clear()

        assert history.count == 0
        assert history.capacity == 2

    def test_default_capacity(self) -> None:
        """Ёмкость по умолчанию"""
        assert History().capacity == DEFAULT_HISTORY_CAPACITY

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_invalid_capacity(self, capacity: int) -> None:
        """capacity <= 0 → ValueError"""
        with pytest.raises(ValueError, match="History capacity must be positive"):
            History(capacity=capacity)


class TestHistoryEntry:
    """Тесты HistoryEntry"""

    def test_frozen(self) -> None:
        """HistoryEntry immutable"""
        entry = HistoryEntry(time=1, value=60)

        with pytest.raises(ValidationError):
            entry.value = 70
