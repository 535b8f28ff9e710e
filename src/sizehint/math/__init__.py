"""
Math modules для size hint

Беззнаковые примитивы (checked/saturating) и арифметика size hint'ов.
"""

# Unsigned Safeguards
from src.sizehint.math.unsigned_safeguards import (
    # Platform constants
    USIZE_BITS,
    USIZE_MAX,
    unsigned_max,
    # Checked arithmetic
    checked_add,
    checked_mul,
    # Saturating arithmetic
    saturating_add,
    saturating_mul,
    # Validation
    is_valid_unsigned,
    validate_unsigned,
)

# Size Hint
from src.sizehint.math.size_hint import (
    EMPTY,
    SINGLE,
    UNKNOWN,
    SizeHint,
    SizeHintArithmetic,
    SizeHintConfig,
    SizeHintDomainError,
    add,
    add_scalar,
    at_least,
    contains,
    exact,
    is_exact,
    max,
    min,
    mul,
    mul_scalar,
    product_all,
    size_hint_of,
    sum_all,
    validate_size_hint,
)

__all__ = [
    # Unsigned Safeguards — Platform constants
    "USIZE_BITS",
    "USIZE_MAX",
    "unsigned_max",
    # Unsigned Safeguards — Checked arithmetic
    "checked_add",
    "checked_mul",
    # Unsigned Safeguards — Saturating arithmetic
    "saturating_add",
    "saturating_mul",
    # Unsigned Safeguards — Validation
    "is_valid_unsigned",
    "validate_unsigned",
    # Size Hint — Constants
    "EMPTY",
    "SINGLE",
    "UNKNOWN",
    # Size Hint — Types
    "SizeHint",
    "SizeHintArithmetic",
    "SizeHintConfig",
    # Size Hint — Exceptions
    "SizeHintDomainError",
    # Size Hint — Operations
    "add",
    "add_scalar",
    "max",
    "min",
    "mul",
    "mul_scalar",
    "product_all",
    "sum_all",
    # Size Hint — Constructors and predicates
    "at_least",
    "contains",
    "exact",
    "is_exact",
    "size_hint_of",
    "validate_size_hint",
]
