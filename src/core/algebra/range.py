"""
Range — Алгебра упорядоченных интервалов

Предикаты над totally-ordered значениями (любой тип с операторами < <= > >=).

Варианты (закрытое семейство):
- ContiguousRange: [minimum, maximum] с открытыми/закрытыми границами, None = ±∞
- ComplementRange: отрицание базового range
- CompoundRange: ALL (пересечение) / ANY (объединение) упорядоченного набора ranges

Операции: contains, intersection, union, complement, shadows.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ContiguousRange с minimum > maximum пуст (contains всегда False)
2. Пересечение двух ContiguousRange с minimum > maximum деградирует в CompoundRange(ALL)
3. complement(complement(r)) эквивалентен r по contains
4. Пересечение коммутативно по результату contains
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

logger = logging.getLogger(__name__)

V = TypeVar("V")


class CompoundLogic(str, Enum):
    """Логика комбинирования составных предикатов (ranges и domains)"""

    ALL = "ALL"
    ANY = "ANY"


# =============================================================================
# ОБЩИЕ ОПЕРАЦИИ
# =============================================================================


class _RangeOps:
    """Методы и операторы, общие для всех вариантов Range.

    Вся логика находится в функциях модуля (range_contains и т.д.),
    методы только делегируют.
    """

    def contains(self, value: Any) -> bool:
        return range_contains(self, value)

    def __contains__(self, value: Any) -> bool:
        return range_contains(self, value)

    def intersection(self, other: "Range") -> "Range":
        return range_intersection(self, other)

    def union(self, other: "Range") -> "Range":
        return range_union(self, other)

    @property
    def complement(self) -> "Range":
        return range_complement(self)

    def shadows(self, other: "Range") -> Optional[bool]:
        return range_shadows(self, other)

    def __and__(self, other: "Range") -> "Range":
        return range_intersection(self, other)

    def __or__(self, other: "Range") -> "Range":
        return range_union(self, other)

    def __invert__(self) -> "Range":
        return range_complement(self)


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


@dataclass(frozen=True)
class ContiguousRange(_RangeOps, Generic[V]):
    """
    Непрерывный интервал между опциональными minimum и maximum.

    Каждая граница может быть включена (closed), исключена (open)
    или отсутствовать (None = unbounded).

    По умолчанию: [minimum, maximum) — minimum включён, maximum исключён.
    """

    minimum: Optional[V] = None
    inc_minimum: bool = True
    maximum: Optional[V] = None
    inc_maximum: bool = False

    @classmethod
    def at_least(cls, minimum: V, inclusive: bool = True) -> "ContiguousRange[V]":
        """Интервал без верхней границы: [minimum, +∞) или (minimum, +∞)"""
        return cls(minimum=minimum, inc_minimum=inclusive, maximum=None, inc_maximum=False)

    @classmethod
    def below(cls, maximum: V, inclusive: bool = False) -> "ContiguousRange[V]":
        """Интервал без нижней границы: (-∞, maximum) или (-∞, maximum]"""
        return cls(minimum=None, inc_minimum=False, maximum=maximum, inc_maximum=inclusive)

    @classmethod
    def between(
        cls,
        minimum: V,
        maximum: V,
        inc_minimum: bool = True,
        inc_maximum: bool = False,
    ) -> "ContiguousRange[V]":
        """Интервал с обеими границами"""
        return cls(
            minimum=minimum, inc_minimum=inc_minimum, maximum=maximum, inc_maximum=inc_maximum
        )

    @property
    def is_unbounded(self) -> bool:
        """True если нет ни одной границы (предикат всегда True)"""
        return self.minimum is None and self.maximum is None

    @property
    def is_empty(self) -> bool:
        """
        True если интервал вырожден и не содержит ни одного значения.

        Пустой интервал: minimum > maximum, либо minimum == maximum
        и хотя бы одна граница исключена.
        """
        if self.minimum is None or self.maximum is None:
            return False
        if self.minimum > self.maximum:
            return True
        return self.minimum == self.maximum and not (self.inc_minimum and self.inc_maximum)


@dataclass(frozen=True)
class ComplementRange(_RangeOps, Generic[V]):
    """Дополнение базового range: contains = not range.contains"""

    range: "Range"


@dataclass(frozen=True)
class CompoundRange(_RangeOps, Generic[V]):
    """
    Составной range: упорядоченный набор sub-ranges с логикой ALL или ANY.

    ALL — пересечение (все sub-ranges содержат значение)
    ANY — объединение (хотя бы один sub-range содержит значение)
    """

    logic: CompoundLogic
    ranges: Tuple["Range", ...] = ()

    def __post_init__(self):
        # Списки приводятся к tuple для неизменяемости
        object.__setattr__(self, "ranges", tuple(self.ranges))

    @classmethod
    def of(cls, logic: CompoundLogic, *ranges: "Range") -> "CompoundRange":
        return cls(logic=logic, ranges=ranges)


Range = Union[ContiguousRange, ComplementRange, CompoundRange]


# =============================================================================
# CONTAINS
# =============================================================================


def range_contains(range_: Range, value: Any) -> bool:
    """
    Проверка, содержит ли range значение.

    Args:
        range_: Любой вариант Range
        value: Проверяемое значение

    Returns:
        True если значение принадлежит range

    Raises:
        TypeError: Если range_ не является вариантом Range
    """
    if isinstance(range_, ContiguousRange):
        return _passes_minimum(range_, value) and _passes_maximum(range_, value)

    if isinstance(range_, ComplementRange):
        return not range_contains(range_.range, value)

    if isinstance(range_, CompoundRange):
        if range_.logic == CompoundLogic.ALL:
            return all(range_contains(r, value) for r in range_.ranges)
        return any(range_contains(r, value) for r in range_.ranges)

    raise TypeError(f"Unknown range variant: {type(range_).__name__}")


def _passes_minimum(range_: ContiguousRange, value: Any) -> bool:
    if range_.minimum is None:
        return True
    return range_.minimum <= value if range_.inc_minimum else range_.minimum < value


def _passes_maximum(range_: ContiguousRange, value: Any) -> bool:
    if range_.maximum is None:
        return True
    return value <= range_.maximum if range_.inc_maximum else value < range_.maximum


# =============================================================================
# INTERSECTION / UNION
# =============================================================================


def range_intersection(a: Range, b: Range) -> Range:
    """
    Пересечение двух ranges.

    Для двух ContiguousRange строится новый ContiguousRange:
    - minimum = большая из нижних границ (None не ограничивает)
    - maximum = меньшая из верхних границ (None не ограничивает)
    - включённость берётся от операнда, давшего границу; при равных
      границах граница включена только если включена в обоих операндах

    Если результат пуст по границам (minimum > maximum), либо хотя бы один
    операнд не ContiguousRange — возвращается CompoundRange(ALL, (a, b)).

    Args:
        a: Первый range
        b: Второй range

    Returns:
        Range, содержащий ровно значения, содержащиеся в обоих
    """
    if isinstance(a, ContiguousRange) and isinstance(b, ContiguousRange):
        minimum, inc_minimum = _tighter_minimum(a, b)
        maximum, inc_maximum = _tighter_maximum(a, b)

        if minimum is not None and maximum is not None and minimum > maximum:
            logger.debug(
                "Disjoint contiguous intersection (%r > %r), falling back to compound",
                minimum,
                maximum,
            )
            return CompoundRange(CompoundLogic.ALL, (a, b))

        return ContiguousRange(
            minimum=minimum, inc_minimum=inc_minimum, maximum=maximum, inc_maximum=inc_maximum
        )

    return CompoundRange(CompoundLogic.ALL, (a, b))


def _tighter_minimum(a: ContiguousRange, b: ContiguousRange) -> Tuple[Any, bool]:
    """Большая из нижних границ вместе с её включённостью (None поглощается)"""
    if a.minimum is None:
        return b.minimum, b.inc_minimum
    if b.minimum is None:
        return a.minimum, a.inc_minimum
    if a.minimum > b.minimum:
        return a.minimum, a.inc_minimum
    if b.minimum > a.minimum:
        return b.minimum, b.inc_minimum
    return a.minimum, a.inc_minimum and b.inc_minimum


def _tighter_maximum(a: ContiguousRange, b: ContiguousRange) -> Tuple[Any, bool]:
    """Меньшая из верхних границ вместе с её включённостью (None поглощается)"""
    if a.maximum is None:
        return b.maximum, b.inc_maximum
    if b.maximum is None:
        return a.maximum, a.inc_maximum
    if a.maximum < b.maximum:
        return a.maximum, a.inc_maximum
    if b.maximum < a.maximum:
        return b.maximum, b.inc_maximum
    return a.maximum, a.inc_maximum and b.inc_maximum


def range_union(a: Range, b: Range) -> Range:
    """Объединение двух ranges. Структурные упрощения не выполняются."""
    return CompoundRange(CompoundLogic.ANY, (a, b))


# =============================================================================
# COMPLEMENT
# =============================================================================


def range_complement(range_: Range) -> Range:
    """
    Дополнение range.

    ContiguousRange:
    - обе границы: объединение (-∞, minimum) и (maximum, +∞), включённость
      каждой новой границы инвертирована относительно исходной
    - одна граница: один ContiguousRange по другую сторону от неё
    - без границ (всегда True): всегда-False предикат
    ComplementRange: исходный (обёрнутый) range, без создания нового объекта
    CompoundRange: ComplementRange-обёртка

    Raises:
        TypeError: Если range_ не является вариантом Range
    """
    if isinstance(range_, ContiguousRange):
        below_minimum = None
        above_maximum = None

        if range_.minimum is not None:
            below_minimum = ContiguousRange.below(range_.minimum, inclusive=not range_.inc_minimum)
        if range_.maximum is not None:
            above_maximum = ContiguousRange.at_least(
                range_.maximum, inclusive=not range_.inc_maximum
            )

        if below_minimum is not None and above_maximum is not None:
            return CompoundRange(CompoundLogic.ANY, (below_minimum, above_maximum))
        if below_minimum is not None:
            return below_minimum
        if above_maximum is not None:
            return above_maximum

        # Неограниченный range содержит всё, его дополнение пусто
        return ComplementRange(range_)

    if isinstance(range_, ComplementRange):
        return range_.range

    if isinstance(range_, CompoundRange):
        return ComplementRange(range_)

    raise TypeError(f"Unknown range variant: {type(range_).__name__}")


# =============================================================================
# SHADOWS
# =============================================================================


def range_shadows(a: Range, b: Range) -> Optional[bool]:
    """
    Проверка, накрывает ли a границы b ("shadow").

    Определено только для пары ContiguousRange, иначе None (не определено).

    True если нижняя граница a не выше нижней границы b (None = -∞)
    и симметрично для верхней границы (None = +∞). Равные границы
    засчитываются, если граница a включена либо граница b исключена,
    поэтому любой ContiguousRange накрывает сам себя.

    Returns:
        None если не определено; иначе True/False
    """
    if not (isinstance(a, ContiguousRange) and isinstance(b, ContiguousRange)):
        return None

    return _minimum_below(a.minimum, b.minimum, a.inc_minimum or not b.inc_minimum) and (
        _maximum_above(a.maximum, b.maximum, a.inc_maximum or not b.inc_maximum)
    )


def _minimum_below(a: Any, b: Any, equal_counts: bool) -> bool:
    if a is None:
        return True  # -∞ всегда ниже
    if b is None:
        return False  # b = -∞ ниже любой конечной границы
    return a < b or (equal_counts and a == b)


def _maximum_above(a: Any, b: Any, equal_counts: bool) -> bool:
    if a is None:
        return True  # +∞ всегда выше
    if b is None:
        return False
    return a > b or (equal_counts and a == b)
