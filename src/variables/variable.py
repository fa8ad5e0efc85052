"""
Variable — Именованная, валидируемая, наблюдаемая ячейка значения

Variable хранит значение из domain, время последнего присваивания,
опциональную history и набор monitors (Variable является MonitoredSubject).

Единственная точка изменения — assign(value, time):
1. domain.contains(value) == False → delegate.did_not_assign, состояние не меняется
2. delegate.can_assign(variable, value) == False → delegate.did_not_assign, состояние не меняется
3. Иначе: value и time обновляются, history расширяется, monitors уведомляются
   в порядке регистрации, затем delegate.did_assign

Порядок шага 3 фиксирован: monitors видят уже обновлённое variable.value,
did_assign вызывается последним.

Отклонённое присваивание не является ошибкой и полностью атомарно
(никаких частичных изменений).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from src.core.algebra.domain import Domain, RangeDomain
from src.core.algebra.range import Range
from src.monitoring.subject import MonitoredSubject
from src.variables.history import History

logger = logging.getLogger(__name__)

V = TypeVar("V")


# =============================================================================
# DELEGATE
# =============================================================================


def _always_assign(variable: "Variable", value: Any) -> bool:
    return True


def _ignore(variable: "Variable", value: Any) -> None:
    return None


@dataclass(frozen=True)
class VariableDelegate(Generic[V]):
    """
    Hooks присваивания.

    - can_assign(variable, value) -> bool: разрешение присваивания
    - did_assign(variable, value): вызывается после успешного присваивания
    - did_not_assign(variable, value): вызывается после отклонения

    По умолчанию: всегда разрешать, no-op, no-op.
    """

    can_assign: Callable[["Variable[V]", V], bool] = _always_assign
    did_assign: Callable[["Variable[V]", V], None] = _ignore
    did_not_assign: Callable[["Variable[V]", V], None] = _ignore


# =============================================================================
# РЕЗУЛЬТАТ ПРИСВАИВАНИЯ
# =============================================================================


class AssignmentOutcome(str, Enum):
    """Исход assign"""

    ASSIGNED = "ASSIGNED"
    DOMAIN_VIOLATION = "DOMAIN_VIOLATION"
    DELEGATE_VETO = "DELEGATE_VETO"


@dataclass(frozen=True)
class AssignmentResult:
    """Результат assign (диагностика; контракт — hooks delegate)."""

    assigned: bool
    outcome: AssignmentOutcome
    value: Any
    time: Any

    # Количество monitors, сообщивших значение (0 при отклонении)
    monitors_reported: int

    details: str


# =============================================================================
# VARIABLE
# =============================================================================


class Variable(MonitoredSubject[V]):
    """
    Variable: name, domain, value, time, history, delegate.

    Создание с начальным значением вне domain невозможно:
    - Variable.create(...) возвращает None
    - Variable(...) выбрасывает ValueError

    Начальное значение оформляется через assign (первая запись history,
    hooks delegate). Если delegate отклоняет начальное значение, Variable
    всё равно создаётся с этим значением, но history остаётся пустой.
    """

    def __init__(
        self,
        name: str,
        time: Any,
        value: V,
        domain: Domain,
        history: Optional[History] = None,
        delegate: Optional[VariableDelegate[V]] = None,
    ):
        """
        Args:
            name: имя переменной (непустое)
            time: время начального значения
            value: начальное значение (должно принадлежать domain)
            domain: domain допустимых значений
            history: опциональная history
            delegate: hooks присваивания (default: VariableDelegate())

        Raises:
            ValueError: если name пустое или value вне domain
        """
        super().__init__()

        if not name:
            raise ValueError("Variable name must be non-empty")

        self._name = name
        self._domain = domain
        self._value = value
        self._time = time
        self._history = history
        self.delegate: VariableDelegate[V] = delegate or VariableDelegate()

        if not domain.contains(value):
            raise ValueError(
                f"Initial value {value!r} of variable '{name}' is outside its domain"
            )

        self.assign(value, time)

    @classmethod
    def create(
        cls,
        name: str,
        time: Any,
        value: V,
        domain: Domain,
        history: Optional[History] = None,
        delegate: Optional[VariableDelegate[V]] = None,
    ) -> Optional["Variable[V]"]:
        """
        Создание Variable без исключения при нарушении domain.

        Returns:
            Variable или None, если value вне domain
        """
        if not domain.contains(value):
            logger.debug("Variable '%s' not created: initial value %r outside domain", name, value)
            return None
        return cls(name=name, time=time, value=value, domain=domain, history=history, delegate=delegate)

    @classmethod
    def over_range(
        cls,
        name: str,
        time: Any,
        value: V,
        range_: Range,
        history: Optional[History] = None,
        delegate: Optional[VariableDelegate[V]] = None,
    ) -> Optional["Variable[V]"]:
        """Создание Variable с RangeDomain (None, если value вне range)"""
        return cls.create(
            name=name,
            time=time,
            value=value,
            domain=RangeDomain(range_),
            history=history,
            delegate=delegate,
        )

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def value(self) -> V:
        return self._value

    @property
    def time(self) -> Any:
        return self._time

    @property
    def history(self) -> Optional[History]:
        return self._history

    @history.setter
    def history(self, history: Optional[History]) -> None:
        self._history = history

    # -------------------------------------------------------------------------
    # Присваивание
    # -------------------------------------------------------------------------

    def assign(self, value: V, time: Any) -> AssignmentResult:
        """
        Присваивание value в момент time.

        Args:
            value: новое значение
            time: время присваивания (монотонность не проверяется)

        Returns:
            AssignmentResult с исходом
        """
        if not self._domain.contains(value):
            return self._reject(value, time, AssignmentOutcome.DOMAIN_VIOLATION)

        if not self.delegate.can_assign(self, value):
            return self._reject(value, time, AssignmentOutcome.DELEGATE_VETO)

        self._value = value
        self._time = time
        if self._history is not None:
            self._history.extend(time, value)

        reported = self.update_monitors_for(value)
        self.delegate.did_assign(self, value)

        return AssignmentResult(
            assigned=True,
            outcome=AssignmentOutcome.ASSIGNED,
            value=value,
            time=time,
            monitors_reported=reported,
            details=f"{self._name} = {value!r} at {time!r}",
        )

    def _reject(self, value: V, time: Any, outcome: AssignmentOutcome) -> AssignmentResult:
        logger.debug("Variable '%s' rejected %r at %r: %s", self._name, value, time, outcome.value)
        self.delegate.did_not_assign(self, value)
        return AssignmentResult(
            assigned=False,
            outcome=outcome,
            value=value,
            time=time,
            monitors_reported=0,
            details=f"{self._name} kept {self._value!r}, rejected {value!r} ({outcome.value})",
        )

    def __repr__(self) -> str:
        return f"Variable(name={self._name!r}, value={self._value!r}, time={self._time!r})"
