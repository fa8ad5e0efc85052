"""
Algebra — предикаты над значениями: ranges и domains.

Ranges описывают упорядоченные интервалы, domains обобщают их
на произвольные множества допустимых значений.
"""

from src.core.algebra.domain import (
    AlwaysDomain,
    ComplementDomain,
    CompoundDomain,
    Domain,
    EnumeratedDomain,
    RangeDomain,
    SetDomain,
    SingletonDomain,
    domain_complement,
    domain_contains,
    domain_from_range,
)
from src.core.algebra.range import (
    ComplementRange,
    CompoundLogic,
    CompoundRange,
    ContiguousRange,
    Range,
    range_complement,
    range_contains,
    range_intersection,
    range_shadows,
    range_union,
)

__all__ = [
    # Range algebra
    "CompoundLogic",
    "Range",
    "ContiguousRange",
    "ComplementRange",
    "CompoundRange",
    "range_contains",
    "range_intersection",
    "range_union",
    "range_complement",
    "range_shadows",
    # Domain algebra
    "Domain",
    "AlwaysDomain",
    "SingletonDomain",
    "EnumeratedDomain",
    "SetDomain",
    "RangeDomain",
    "ComplementDomain",
    "CompoundDomain",
    "domain_contains",
    "domain_complement",
    "domain_from_range",
]
