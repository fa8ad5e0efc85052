"""MonitoredSubject — объект с упорядоченным набором monitors.

Monitors хранятся по ссылке (без копирования), членство проверяется по
identity. update_monitors_for рассылает значение всем monitors в порядке
регистрации.
"""

import logging
from typing import Generic, List, Tuple, TypeVar

from .monitor import Monitor

logger = logging.getLogger(__name__)

V = TypeVar("V")


class MonitoredSubject(Generic[V]):
    """Наблюдаемый объект.

    Наследники могут переопределить accepts_monitor для отказа
    в регистрации monitor.
    """

    def __init__(self):
        self._monitors: List[Monitor[V]] = []

    @property
    def monitors(self) -> Tuple[Monitor[V], ...]:
        """Снапшот зарегистрированных monitors (в порядке регистрации)"""
        return tuple(self._monitors)

    def has_monitor(self, monitor: Monitor[V]) -> bool:
        return any(m is monitor for m in self._monitors)

    def add_monitor(self, monitor: Monitor[V]) -> bool:
        """Регистрация monitor.

        Returns:
            True если monitor добавлен; False если отклонён accepts_monitor
            или уже зарегистрирован
        """
        if self.has_monitor(monitor):
            return False
        if not self.accepts_monitor(monitor):
            logger.debug("%s refused monitor %s", type(self).__name__, type(monitor).__name__)
            return False
        self._monitors.append(monitor)
        return True

    def rem_monitor(self, monitor: Monitor[V]) -> bool:
        """Удаление monitor (по identity).

        Returns:
            True если monitor был зарегистрирован и удалён
        """
        for index, m in enumerate(self._monitors):
            if m is monitor:
                del self._monitors[index]
                return True
        logger.debug("Monitor %s is not registered, nothing removed", type(monitor).__name__)
        return False

    def accepts_monitor(self, monitor: Monitor[V]) -> bool:
        return True

    def update_monitors_for(self, value: V) -> int:
        """Рассылка value всем monitors в порядке регистрации.

        Returns:
            Количество monitors, сообщивших значение
        """
        reported = 0
        for monitor in list(self._monitors):
            if monitor.update(value):
                reported += 1
        return reported
