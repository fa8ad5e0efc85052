"""
Core math modules

Конвертеры значений без состояния: forward-преобразование и опциональное
обратное (None, если обратное не определено).
"""

from src.core.math.models import (
    BitwiseModel,
    ConstantModel,
    FunctionalModel,
    LinearModel,
    Model,
    PiecewiseConstantModel,
    PolynomialModel,
)

__all__ = [
    "Model",
    "ConstantModel",
    "LinearModel",
    "PolynomialModel",
    "BitwiseModel",
    "PiecewiseConstantModel",
    "FunctionalModel",
]
