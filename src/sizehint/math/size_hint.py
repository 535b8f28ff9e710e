"""
Size Hint — арифметика границ кардинальности ленивых последовательностей

Size hint — пара (lower, upper), где lower гарантированный минимум элементов,
а upper известный максимум либо None ("сверху не ограничено / неизвестно").
Комбинаторы ленивых последовательностей (chain, zip, repeat, product и т.д.)
выводят свой size hint из hint'ов источников, не материализуя их.

Операции:
- add_scalar / add — конкатенация (сумма границ)
- mul_scalar / mul — повторение и декартово произведение
- max / min — альтернатива (доминирует длинная / короткая ветвь)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции тотальны: никаких исключений на валидном диапазоне
2. Переполнение lower → насыщение до максимума (гарантия "не меньше")
3. Переполнение upper → None (конечный clamp дал бы ложную верхнюю границу)
4. 0 * "неограниченно" == ровно 0 (upper = 0, а не None)
5. Операции не мутируют входы и всегда возвращают новую пару
"""

import builtins
from dataclasses import dataclass
from typing import Final, Iterable, Optional

from src.sizehint.math.unsigned_safeguards import (
    USIZE_BITS,
    USIZE_MAX,
    checked_add,
    checked_mul,
    saturating_add,
    saturating_mul,
    unsigned_max,
    validate_unsigned,
)

# (lower, upper): upper is None означает "без известной верхней границы"
SizeHint = tuple[int, Optional[int]]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ничего не известно о длине (дефолтный hint произвольного итератора)
UNKNOWN: Final[SizeHint] = (0, None)

# Гарантированно пустая последовательность (нейтральный элемент для add)
EMPTY: Final[SizeHint] = (0, 0)

# Ровно один элемент (нейтральный элемент для mul)
SINGLE: Final[SizeHint] = (1, 1)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SizeHintDomainError(ValueError):
    """
    Size hint вне допустимой области.

    Возбуждается только явной валидацией (validate_size_hint).
    Арифметические операции никогда не проверяют входы.
    """

    pass


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class SizeHintConfig:
    """Разрядность эмулируемого size_t.

    По умолчанию совпадает с платформой (USIZE_BITS). Меньшая разрядность
    позволяет воспроизвести поведение 32-битной платформы.
    """

    bits: int = USIZE_BITS

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение счётчика."""
        return unsigned_max(self.bits)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class SizeHintArithmetic:
    """
    Арифметика size hint'ов для заданной разрядности.

    Класс не хранит состояния кроме конфигурации, поэтому один экземпляр
    безопасно разделять между потоками.
    """

    def __init__(self, config: Optional[SizeHintConfig] = None):
        self.config = config or SizeHintConfig()
        self._max_value = self.config.max_value

    @property
    def max_value(self) -> int:
        return self._max_value

    def add_scalar(self, sh: SizeHint, x: int) -> SizeHint:
        """
        Прибавление константы x к обеим границам.

        lower насыщается до максимума, upper при переполнении становится None.

        Examples:
            >>> SizeHintArithmetic().add_scalar((3, 4), 2)
            (5, 6)
            >>> SizeHintArithmetic(SizeHintConfig(bits=8)).add_scalar((250, 254), 10)
            (255, None)
        """
        low, hi = sh
        low = saturating_add(low, x, self._max_value)
        if hi is not None:
            hi = checked_add(hi, x, self._max_value)
        return (low, hi)

    def add(self, a: SizeHint, b: SizeHint) -> SizeHint:
        """
        Сумма двух size hint'ов (конкатенация последовательностей).

        upper известен, только если известны обе верхние границы
        и их сумма представима.

        Examples:
            >>> SizeHintArithmetic().add((1, 2), (3, None))
            (4, None)
            >>> SizeHintArithmetic().add((1, 2), (3, 4))
            (4, 6)
        """
        low = checked_add(a[0], b[0], self._max_value)
        if low is None:
            low = self._max_value

        a_hi, b_hi = a[1], b[1]
        if a_hi is not None and b_hi is not None:
            hi = checked_add(a_hi, b_hi, self._max_value)
        else:
            hi = None

        return (low, hi)

    def mul_scalar(self, sh: SizeHint, x: int) -> SizeHint:
        """
        Умножение обеих границ на константу x (повторение x раз).

        Неограниченная последовательность, повторённая 0 раз, даёт ровно 0
        элементов: при x == 0 upper всегда 0.

        Examples:
            >>> SizeHintArithmetic().mul_scalar((3, 4), 3)
            (9, 12)
            >>> SizeHintArithmetic().mul_scalar((3, None), 0)
            (0, 0)
        """
        low, hi = sh
        low = saturating_mul(low, x, self._max_value)
        if x == 0:
            hi = 0
        elif hi is not None:
            hi = checked_mul(hi, x, self._max_value)
        return (low, hi)

    def mul(self, a: SizeHint, b: SizeHint) -> SizeHint:
        """
        Произведение двух size hint'ов (декартово произведение, вложенный обход).

        Если одна верхняя граница ровно 0, а другая неизвестна, результат
        ровно 0: пустой множитель обнуляет произведение.

        Examples:
            >>> SizeHintArithmetic().mul((3, 4), (3, 4))
            (9, 16)
            >>> SizeHintArithmetic().mul((3, None), (0, 0))
            (0, 0)
        """
        low = saturating_mul(a[0], b[0], self._max_value)

        a_hi, b_hi = a[1], b[1]
        if a_hi is not None and b_hi is not None:
            hi = checked_mul(a_hi, b_hi, self._max_value)
        elif a_hi == 0 or b_hi == 0:
            hi = 0
        else:
            hi = None

        return (low, hi)

    def max(self, a: SizeHint, b: SizeHint) -> SizeHint:
        """
        Покомпонентный максимум.

        Неизвестная верхняя граница доминирует: если у любой стороны upper
        отсутствует, у результата тоже.
        """
        a_lower, a_upper = a
        b_lower, b_upper = b

        lower = builtins.max(a_lower, b_lower)

        if a_upper is not None and b_upper is not None:
            upper = builtins.max(a_upper, b_upper)
        else:
            upper = None

        return (lower, upper)

    def min(self, a: SizeHint, b: SizeHint) -> SizeHint:
        """
        Покомпонентный минимум.

        Если известна только одна верхняя граница, берётся она.
        """
        a_lower, a_upper = a
        b_lower, b_upper = b

        lower = builtins.min(a_lower, b_lower)

        if a_upper is not None and b_upper is not None:
            upper = builtins.min(a_upper, b_upper)
        elif a_upper is not None:
            upper = a_upper
        else:
            upper = b_upper

        return (lower, upper)

    def sum_all(self, hints: Iterable[SizeHint]) -> SizeHint:
        """Свёртка add по всем hint'ам (пустой набор → EMPTY)."""
        result = EMPTY
        for sh in hints:
            result = self.add(result, sh)
        return result

    def product_all(self, hints: Iterable[SizeHint]) -> SizeHint:
        """Свёртка mul по всем hint'ам (пустой набор → SINGLE)."""
        result = SINGLE
        for sh in hints:
            result = self.mul(result, sh)
        return result


# Экземпляр с разрядностью платформы, используемый функциями модуля
_DEFAULT_ARITHMETIC: Final[SizeHintArithmetic] = SizeHintArithmetic()


# =============================================================================
# ФУНКЦИИ МОДУЛЯ (разрядность платформы)
# =============================================================================


def add_scalar(sh: SizeHint, x: int) -> SizeHint:
    """
    Прибавление константы к size hint.

    Examples:
        >>> add_scalar((3, 4), 2)
        (5, 6)
        >>> add_scalar((3, None), 2)
        (5, None)
    """
    return _DEFAULT_ARITHMETIC.add_scalar(sh, x)


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Сумма size hint'ов."""
    return _DEFAULT_ARITHMETIC.add(a, b)


def mul_scalar(sh: SizeHint, x: int) -> SizeHint:
    """
    Умножение size hint на константу.

    Examples:
        >>> mul_scalar((3, 4), 3)
        (9, 12)
        >>> mul_scalar((3, 4), USIZE_MAX) == (USIZE_MAX, None)
        True
    """
    return _DEFAULT_ARITHMETIC.mul_scalar(sh, x)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """
    Произведение size hint'ов.

    Examples:
        >>> mul((3, 4), (3, 4))
        (9, 16)
        >>> mul((3, 4), (USIZE_MAX, None)) == (USIZE_MAX, None)
        True
        >>> mul((3, None), (0, 0))
        (0, 0)
    """
    return _DEFAULT_ARITHMETIC.mul(a, b)


def max(a: SizeHint, b: SizeHint) -> SizeHint:
    """Покомпонентный максимум size hint'ов."""
    return _DEFAULT_ARITHMETIC.max(a, b)


def min(a: SizeHint, b: SizeHint) -> SizeHint:
    """Покомпонентный минимум size hint'ов."""
    return _DEFAULT_ARITHMETIC.min(a, b)


def sum_all(hints: Iterable[SizeHint]) -> SizeHint:
    """Size hint конкатенации всех последовательностей."""
    return _DEFAULT_ARITHMETIC.sum_all(hints)


def product_all(hints: Iterable[SizeHint]) -> SizeHint:
    """Size hint декартова произведения всех последовательностей."""
    return _DEFAULT_ARITHMETIC.product_all(hints)


# =============================================================================
# КОНСТРУКТОРЫ И ПРЕДИКАТЫ
# =============================================================================


def exact(n: int) -> SizeHint:
    """Точно известная длина n."""
    return (n, n)


def at_least(n: int) -> SizeHint:
    """Не меньше n элементов, верхняя граница неизвестна."""
    return (n, None)


def size_hint_of(obj: object) -> SizeHint:
    """
    Size hint произвольного объекта.

    Для Sized объектов длина точна. operator.length_hint() намеренно
    не используется: его оценка не является ни нижней, ни верхней границей.

    Examples:
        >>> size_hint_of([1, 2, 3])
        (3, 3)
        >>> size_hint_of(iter([1, 2, 3]))
        (0, None)
    """
    try:
        n = len(obj)  # type: ignore[arg-type]
    except TypeError:
        return UNKNOWN
    return exact(n)


def is_exact(sh: SizeHint) -> bool:
    """True если длина известна точно (upper == lower)."""
    return sh[1] is not None and sh[0] == sh[1]


def contains(sh: SizeHint, n: int) -> bool:
    """True если длина n совместима с size hint."""
    low, hi = sh
    if n < low:
        return False
    return hi is None or n <= hi


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_size_hint(
    sh: object,
    name: str = "size_hint",
    config: Optional[SizeHintConfig] = None,
) -> None:
    """
    Валидация size hint на входе от внешнего кода.

    Args:
        sh: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        config: Разрядность (default: платформа)

    Raises:
        SizeHintDomainError: Если sh не пара (lower, upper), границы вне
            [0, max_value] или upper < lower
    """
    max_value = (config or SizeHintConfig()).max_value

    if not isinstance(sh, tuple) or len(sh) != 2:
        raise SizeHintDomainError(f"{name} must be a (lower, upper) tuple, got {sh!r}")

    low, hi = sh

    try:
        validate_unsigned(low, f"{name}.lower", max_value)
    except ValueError as e:
        raise SizeHintDomainError(str(e)) from e

    if hi is None:
        return

    try:
        validate_unsigned(hi, f"{name}.upper", max_value)
    except ValueError as e:
        raise SizeHintDomainError(str(e)) from e

    if hi < low:
        raise SizeHintDomainError(f"{name}.upper {hi} is below lower {low}")
