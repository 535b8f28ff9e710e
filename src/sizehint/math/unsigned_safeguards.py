"""
Unsigned Safeguards — Safe Unsigned Integer Primitives

Модуль эмулирует беззнаковый машинный тип size_t поверх неограниченного int:
- Checked-арифметика: при переполнении возвращается None
- Saturating-арифметика: при переполнении результат прижимается к максимуму
- Валидация значений диапазона [0, max_value]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не выходит за пределы [0, max_value] (нет wrap-around)
2. Checked-операции сигнализируют переполнение только через None
3. Saturating-операции никогда не возвращают None
4. Все операции детерминированы и не имеют побочных эффектов
"""

import sys
from typing import Final, Optional

# =============================================================================
# ПАРАМЕТРЫ ПЛАТФОРМЫ
# =============================================================================

# Разрядность size_t текущей платформы (64 на 64-битном CPython)
# sys.maxsize соответствует ssize_t, беззнаковый тип шире на один бит
USIZE_BITS: Final[int] = sys.maxsize.bit_length() + 1

# Максимальное представимое значение size_t
USIZE_MAX: Final[int] = (1 << USIZE_BITS) - 1


def unsigned_max(bits: int) -> int:
    """
    Максимальное значение беззнакового типа заданной разрядности.

    Args:
        bits: Разрядность типа (например, 8, 32, 64)

    Returns:
        2**bits - 1

    Raises:
        ValueError: Если bits <= 0

    Examples:
        >>> unsigned_max(8)
        255
        >>> unsigned_max(32)
        4294967295
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")

    return (1 << bits) - 1


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int, max_value: int = USIZE_MAX) -> Optional[int]:
    """
    Сложение с проверкой переполнения.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        max_value: Максимум представимого диапазона (default: USIZE_MAX)

    Returns:
        a + b, либо None если сумма не представима

    Examples:
        >>> checked_add(2, 3)
        5
        >>> checked_add(250, 10, max_value=255) is None
        True
    """
    result = a + b
    if result > max_value:
        return None
    return result


def checked_mul(a: int, b: int, max_value: int = USIZE_MAX) -> Optional[int]:
    """
    Умножение с проверкой переполнения.

    Args:
        a: Первый множитель
        b: Второй множитель
        max_value: Максимум представимого диапазона (default: USIZE_MAX)

    Returns:
        a * b, либо None если произведение не представимо

    Examples:
        >>> checked_mul(3, 4)
        12
        >>> checked_mul(16, 16, max_value=255) is None
        True
    """
    result = a * b
    if result > max_value:
        return None
    return result


# =============================================================================
# SATURATING-АРИФМЕТИКА
# =============================================================================


def saturating_add(a: int, b: int, max_value: int = USIZE_MAX) -> int:
    """
    Сложение с насыщением: при переполнении возвращается max_value.

    Examples:
        >>> saturating_add(2, 3)
        5
        >>> saturating_add(250, 10, max_value=255)
        255
    """
    result = checked_add(a, b, max_value)
    if result is None:
        return max_value
    return result


def saturating_mul(a: int, b: int, max_value: int = USIZE_MAX) -> int:
    """
    Умножение с насыщением: при переполнении возвращается max_value.

    Examples:
        >>> saturating_mul(3, 4)
        12
        >>> saturating_mul(16, 16, max_value=255)
        255
    """
    result = checked_mul(a, b, max_value)
    if result is None:
        return max_value
    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_unsigned(value: object, max_value: int = USIZE_MAX) -> bool:
    """
    Проверка, что значение представимо беззнаковым типом.

    bool формально является подклассом int, но счётчиком не считается.

    Args:
        value: Проверяемое значение
        max_value: Максимум представимого диапазона (default: USIZE_MAX)

    Returns:
        True если value — int в диапазоне [0, max_value]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= max_value


def validate_unsigned(value: object, name: str, max_value: int = USIZE_MAX) -> None:
    """
    Валидация беззнакового значения.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        max_value: Максимум представимого диапазона (default: USIZE_MAX)

    Raises:
        ValueError: Если value не int или вне диапазона [0, max_value]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
