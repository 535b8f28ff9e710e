"""
SizeHintBounds — валидированная модель size hint

Immutable Pydantic модель для size hint'ов, приходящих из внешних источников
(JSON, конфигурация, API). Соответствует схеме contracts/schema/size_hint.json.

Операторы модели делегируют арифметику в src.sizehint.math.size_hint:
    a + b  → add / add_scalar
    a * b  → mul / mul_scalar
    a | b  → max
    a & b  → min
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.sizehint.math import size_hint as arith
from src.sizehint.math.size_hint import SizeHint
from src.sizehint.math.unsigned_safeguards import USIZE_MAX, is_valid_unsigned


class SizeHintBounds(BaseModel):
    """
    Границы числа элементов ленивой последовательности.

    Immutable модель (frozen=True, strict=True): операторы создают новый экземпляр.
    В отличие от голого tuple, модель гарантирует lower <= upper.
    """

    lower: int = Field(0, ge=0, description="Гарантированный минимум элементов")
    upper: Optional[int] = Field(
        None, ge=0, description="Известный максимум элементов (None — не ограничено)"
    )

    # strict: bool и строки не приводятся к int, как в validate_size_hint и контракте
    model_config = {"frozen": True, "strict": True}

    @field_validator("lower", "upper")
    @classmethod
    def validate_representable(cls, v: Optional[int]) -> Optional[int]:
        """Проверка, что граница представима size_t платформы."""
        if v is not None and not is_valid_unsigned(v):
            raise ValueError(f"bound {v} exceeds USIZE_MAX {USIZE_MAX}")
        return v

    @model_validator(mode="after")
    def validate_order(self) -> "SizeHintBounds":
        """Проверка lower <= upper."""
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(f"upper {self.upper} is below lower {self.lower}")
        return self

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_tuple(cls, sh: SizeHint) -> "SizeHintBounds":
        """Создание модели из пары (lower, upper)."""
        lower, upper = sh
        return cls(lower=lower, upper=upper)

    def as_tuple(self) -> SizeHint:
        return (self.lower, self.upper)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_exact(self) -> bool:
        return arith.is_exact(self.as_tuple())

    def is_bounded(self) -> bool:
        return self.upper is not None

    def contains(self, n: int) -> bool:
        return arith.contains(self.as_tuple(), n)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "SizeHintBounds":
        if isinstance(other, SizeHintBounds):
            return self.from_tuple(arith.add(self.as_tuple(), other.as_tuple()))
        if isinstance(other, int) and not isinstance(other, bool) and other >= 0:
            return self.from_tuple(arith.add_scalar(self.as_tuple(), other))
        return NotImplemented

    __radd__ = __add__

    def __mul__(self, other: object) -> "SizeHintBounds":
        if isinstance(other, SizeHintBounds):
            return self.from_tuple(arith.mul(self.as_tuple(), other.as_tuple()))
        if isinstance(other, int) and not isinstance(other, bool) and other >= 0:
            return self.from_tuple(arith.mul_scalar(self.as_tuple(), other))
        return NotImplemented

    __rmul__ = __mul__

    def __or__(self, other: object) -> "SizeHintBounds":
        if not isinstance(other, SizeHintBounds):
            return NotImplemented
        return self.from_tuple(arith.max(self.as_tuple(), other.as_tuple()))

    def __and__(self, other: object) -> "SizeHintBounds":
        if not isinstance(other, SizeHintBounds):
            return NotImplemented
        return self.from_tuple(arith.min(self.as_tuple(), other.as_tuple()))
