"""
Domain — Алгебра множеств допустимых значений

Domain — предикат, классифицирующий значение как допустимое или нет.
Обобщает Range на произвольные типы значений.

Варианты (закрытое семейство):
- AlwaysDomain: константа True/False, значение игнорируется
- SingletonDomain: равенство одному значению через comparator
- EnumeratedDomain: линейный поиск по списку через comparator, O(N)
- SetDomain: hash-based членство (значения должны быть hashable)
- RangeDomain: делегирует в Range
- ComplementDomain: отрицание обёрнутого Domain
- CompoundDomain: ALL/ANY над упорядоченным набором Domains

ВАЖНО: для SingletonDomain и EnumeratedDomain comparator — единственный
источник семантики равенства. Рефлексивность не предполагается, что
позволяет сравнивать по части ключа (например, только по одному полю).
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Generic, Tuple, TypeVar, Union

from src.core.algebra.range import CompoundLogic, Range, range_contains

V = TypeVar("V")

# Comparator: test(candidate, stored) -> bool
Comparator = Callable[[Any, Any], bool]


class _DomainOps:
    """Методы и операторы, общие для всех вариантов Domain."""

    def contains(self, value: Any) -> bool:
        return domain_contains(self, value)

    def __contains__(self, value: Any) -> bool:
        return domain_contains(self, value)

    def __and__(self, other: "Domain") -> "CompoundDomain":
        return CompoundDomain(CompoundLogic.ALL, (self, other))

    def __or__(self, other: "Domain") -> "CompoundDomain":
        return CompoundDomain(CompoundLogic.ANY, (self, other))

    def __invert__(self) -> "Domain":
        return domain_complement(self)


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


@dataclass(frozen=True)
class AlwaysDomain(_DomainOps):
    """Domain с фиксированным результатом contains, значение игнорируется"""

    result: bool


@dataclass(frozen=True)
class SingletonDomain(_DomainOps, Generic[V]):
    """
    Domain из одного значения.

    Членство: test(candidate, value). По умолчанию test = operator.eq.
    """

    value: V
    test: Comparator = operator.eq


@dataclass(frozen=True)
class EnumeratedDomain(_DomainOps, Generic[V]):
    """
    Domain из перечисленных значений.

    Членство: any(test(candidate, v) for v in values). Худший случай O(N).
    """

    values: Tuple[V, ...]
    test: Comparator = operator.eq

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def of(cls, *values: V) -> "EnumeratedDomain[V]":
        return cls(values=values)


@dataclass(frozen=True)
class SetDomain(_DomainOps, Generic[V]):
    """Domain из множества hashable значений (членство через hash)"""

    values: FrozenSet[V]

    def __post_init__(self):
        object.__setattr__(self, "values", frozenset(self.values))

    @classmethod
    def of(cls, *values: V) -> "SetDomain[V]":
        return cls(values=frozenset(values))


@dataclass(frozen=True)
class RangeDomain(_DomainOps, Generic[V]):
    """Domain, членство в котором определяется Range"""

    range: Range


@dataclass(frozen=True)
class ComplementDomain(_DomainOps, Generic[V]):
    """Дополнение обёрнутого Domain"""

    domain: "Domain"


@dataclass(frozen=True)
class CompoundDomain(_DomainOps, Generic[V]):
    """
    Составной Domain: ALL (логическое И) или ANY (логическое ИЛИ)
    над упорядоченным набором sub-domains.

    Вычисление с short-circuit: ALL останавливается на первом False,
    ANY — на первом True.
    """

    logic: CompoundLogic
    domains: Tuple["Domain", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "domains", tuple(self.domains))

    @classmethod
    def of(cls, logic: CompoundLogic, *domains: "Domain") -> "CompoundDomain":
        return cls(logic=logic, domains=domains)


Domain = Union[
    AlwaysDomain,
    SingletonDomain,
    EnumeratedDomain,
    SetDomain,
    RangeDomain,
    ComplementDomain,
    CompoundDomain,
]


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def domain_contains(domain: Domain, value: Any) -> bool:
    """
    Проверка членства значения в domain.

    Args:
        domain: Любой вариант Domain
        value: Проверяемое значение

    Returns:
        True если значение допустимо

    Raises:
        TypeError: Если domain не является вариантом Domain
    """
    if isinstance(domain, AlwaysDomain):
        return domain.result

    if isinstance(domain, SingletonDomain):
        return bool(domain.test(value, domain.value))

    if isinstance(domain, EnumeratedDomain):
        return any(domain.test(value, v) for v in domain.values)

    if isinstance(domain, SetDomain):
        return value in domain.values

    if isinstance(domain, RangeDomain):
        return range_contains(domain.range, value)

    if isinstance(domain, ComplementDomain):
        return not domain_contains(domain.domain, value)

    if isinstance(domain, CompoundDomain):
        if domain.logic == CompoundLogic.ALL:
            return all(domain_contains(d, value) for d in domain.domains)
        return any(domain_contains(d, value) for d in domain.domains)

    raise TypeError(f"Unknown domain variant: {type(domain).__name__}")


def domain_complement(domain: Domain) -> Domain:
    """Дополнение domain. Дополнение ComplementDomain — исходный domain."""
    if isinstance(domain, ComplementDomain):
        return domain.domain
    return ComplementDomain(domain)


def domain_from_range(range_: Range) -> RangeDomain:
    """Domain из Range"""
    return RangeDomain(range_)
