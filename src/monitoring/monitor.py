"""Monitor — политики оповещения об обновлениях значения.

Monitor наблюдает за обновлениями значения и сообщает (report) о нём при
выполнении двух условий:
1. Monitor не замаскирован (masked)
2. is_reportable(value) возвращает True

States:
- unmasked/tracking: обновления отслеживаются и сообщаются
- masked/tracking: обновления отслеживаются, report подавлен

Внутреннее состояние (last_value, persistence_count) обновляется при любом
update, в том числе в замаскированном состоянии. Маскирование подавляет
только report.

Monitors сравниваются по identity (не по значению): один и тот же экземпляр
может быть зарегистрирован в subject и управляться снаружи.
"""

import operator
from typing import Any, Callable, Generic, Optional, TypeVar

from src.core.algebra.domain import Domain, domain_contains

V = TypeVar("V")

ReportCallback = Callable[[V], None]

# Маркер "last_value не задан" (None допустим как значение)
_NO_VALUE: Any = object()


class Monitor(Generic[V]):
    """Базовый monitor: любое значение reportable.

    Report выполняется через on_report callback (если задан) либо
    переопределением report() в наследнике.
    """

    def __init__(self, on_report: Optional[ReportCallback] = None):
        """
        Args:
            on_report: вызывается с обновлённым значением при report
        """
        self._masked = False
        self._on_report = on_report

    @property
    def is_masked(self) -> bool:
        return self._masked

    def update(self, value: V) -> bool:
        """Обновление monitor значением value.

        Args:
            value: обновлённое значение

        Returns:
            True если value было сообщено (report)
        """
        if not self._masked and self.is_reportable(value):
            self.report(value)
            return True
        return False

    def report(self, value: V) -> None:
        if self._on_report is not None:
            self._on_report(value)

    def is_reportable(self, value: V) -> bool:
        return True

    def reset(self) -> None:
        """Сброс transient состояния. Флаг masked не затрагивается."""

    def mask(self) -> None:
        self._masked = True

    def unmask_and_reset(self) -> None:
        self._masked = False
        self.reset()


class OnChangeMonitor(Monitor[V]):
    """Сообщает значение, если оно отличается от последнего обновлённого.

    Reportable если: нет last_value, либо changed(value, last_value).
    is_reportable оценивается ДО того, как value станет last_value.
    """

    def __init__(
        self,
        value: Any = _NO_VALUE,
        changed: Callable[[V, V], bool] = operator.ne,
        on_report: Optional[ReportCallback] = None,
    ):
        """
        Args:
            value: начальный last_value (по умолчанию не задан; None допустим)
            changed: предикат изменения changed(new, last)
            on_report: callback для report
        """
        super().__init__(on_report=on_report)
        self.changed = changed
        self._has_last_value = value is not _NO_VALUE
        self._last_value = value if self._has_last_value else None

    @property
    def last_value(self) -> Optional[V]:
        return self._last_value

    @property
    def has_last_value(self) -> bool:
        return self._has_last_value

    def is_reportable(self, value: V) -> bool:
        return not self._has_last_value or bool(self.changed(value, self._last_value))

    def update(self, value: V) -> bool:
        reported = super().update(value)
        self._last_value = value
        self._has_last_value = True
        return reported


class DomainMonitor(Monitor[V]):
    """Сообщает значение, если оно принадлежит domain."""

    def __init__(self, domain: Domain, on_report: Optional[ReportCallback] = None):
        super().__init__(on_report=on_report)
        self.domain = domain

    def is_reportable(self, value: V) -> bool:
        return domain_contains(self.domain, value)


class PersistenceDomainMonitor(DomainMonitor[V]):
    """Сообщает значение, если значения остаются внутри domain
    не менее persistence_limit последовательных обновлений.

    persistence_count увеличивается на каждое значение внутри domain и
    сбрасывается в 0 на первом значении вне domain. Счётчик обновляется
    до оценки is_reportable, поэтому reportability отражает уже учтённое
    текущее значение.
    """

    def __init__(
        self,
        limit: int,
        domain: Domain,
        on_report: Optional[ReportCallback] = None,
    ):
        """
        Args:
            limit: минимальное число последовательных значений внутри domain
            domain: domain для проверки
            on_report: callback для report

        Raises:
            ValueError: если limit < 1
        """
        if limit < 1:
            raise ValueError(f"persistence limit must be >= 1, got {limit}")
        super().__init__(domain=domain, on_report=on_report)
        self.persistence_limit = limit
        self._persistence_count = 0

    @property
    def persistence_count(self) -> int:
        return self._persistence_count

    def update(self, value: V) -> bool:
        if domain_contains(self.domain, value):
            self._persistence_count += 1
        else:
            self._persistence_count = 0
        return super().update(value)

    def is_reportable(self, value: V) -> bool:
        return self._persistence_count >= self.persistence_limit

    def reset(self) -> None:
        self._persistence_count = 0
