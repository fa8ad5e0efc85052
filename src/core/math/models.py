"""
Models — Конвертеры значений (input → output)

Model преобразует input в output (output = f(input)) и, опционально,
output обратно в input. Обратное преобразование часто некорректно
поставлено (ill-posed): в этом случае apply_reverse возвращает None,
исключение не выбрасывается.

Модели:
- ConstantModel: постоянный output независимо от input
- LinearModel: output = scale * input + offset
- PolynomialModel: output = sum(coeffs[i] * input**i) (data number → engineering value)
- BitwiseModel: извлечение count бит со сдвигом shift
- PiecewiseConstantModel: кусочно-постоянная функция над Range
- FunctionalModel: произвольные forward/reverse функции

Все модели immutable (frozen Pydantic) и не имеют состояния.
"""

from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, Field

from src.core.algebra.range import Range, range_contains


class Model(BaseModel):
    """
    Базовый конвертер.

    apply_forward обязателен для наследников; apply_reverse по умолчанию
    возвращает None (обратное преобразование не определено).
    """

    model_config = {"frozen": True}

    def apply_forward(self, input: Any) -> Any:
        raise NotImplementedError(f"{type(self).__name__} must implement apply_forward")

    def apply_reverse(self, output: Any) -> Optional[Any]:
        return None


class ConstantModel(Model):
    """Возвращает один и тот же output для любого input"""

    output: Any = Field(..., description="Постоянное значение")

    def apply_forward(self, input: Any) -> Any:
        return self.output


class LinearModel(Model):
    """
    Линейная модель: output = scale * input + offset

    Обратное преобразование определено при scale != 0.
    """

    scale: float = Field(..., description="Безразмерный масштаб")
    offset: float = Field(0.0, description="Смещение")

    def apply_forward(self, input: float) -> float:
        return self.scale * input + self.offset

    def apply_reverse(self, output: float) -> Optional[float]:
        if self.scale == 0.0:
            return None
        return (output - self.offset) / self.scale


class PolynomialModel(Model):
    """
    Полиномиальная модель data number → engineering value.

    output = coeffs[0] + coeffs[1] * x + coeffs[2] * x**2 + ...
    Input (обычно целое) приводится к float, вычисление по схеме Горнера.
    """

    coeffs: Tuple[float, ...] = Field(..., min_length=1, description="Коэффициенты по возрастанию степени")

    def apply_forward(self, input: Any) -> float:
        x = float(input)
        result = 0.0
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result


class BitwiseModel(Model):
    """
    Извлечение битового поля: (input >> shift) & ((1 << count) - 1)
    """

    shift: int = Field(..., ge=0, description="Сдвиг вправо (бит)")
    count: int = Field(..., ge=0, description="Количество извлекаемых бит")

    def apply_forward(self, input: int) -> int:
        return (input >> self.shift) & ((1 << self.count) - 1)


class PiecewiseConstantModel(Model):
    """
    Кусочно-постоянная модель.

    pieces — упорядоченные пары (Range, output). Возвращается output первого
    range, содержащего input; иначе otherwise.
    """

    otherwise: Any = Field(..., description="Output, если ни один range не подошёл")
    pieces: Tuple[Tuple[Any, Any], ...] = Field(default=(), description="Пары (Range, output)")

    def apply_forward(self, input: Any) -> Any:
        for range_, output in self.pieces:
            if range_contains(range_, input):
                return output
        return self.otherwise

    @classmethod
    def of(cls, otherwise: Any, *pieces: Tuple[Range, Any]) -> "PiecewiseConstantModel":
        return cls(otherwise=otherwise, pieces=pieces)


class FunctionalModel(Model):
    """Модель из произвольных функций forward и (опционально) reverse"""

    forward: Callable[[Any], Any]
    reverse: Optional[Callable[[Any], Any]] = None

    def apply_forward(self, input: Any) -> Any:
        return self.forward(input)

    def apply_reverse(self, output: Any) -> Optional[Any]:
        if self.reverse is None:
            return None
        return self.reverse(output)
