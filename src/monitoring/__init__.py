"""Monitoring — политики оповещения об обновлениях и наблюдаемые объекты.

- Monitor и варианты: OnChange, Domain, PersistenceDomain
- MonitoredSubject: упорядоченная рассылка обновлений monitors
"""

from .monitor import (
    DomainMonitor,
    Monitor,
    OnChangeMonitor,
    PersistenceDomainMonitor,
)
from .subject import MonitoredSubject

__all__ = [
    "Monitor",
    "OnChangeMonitor",
    "DomainMonitor",
    "PersistenceDomainMonitor",
    "MonitoredSubject",
]
