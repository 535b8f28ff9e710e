"""
Contract Validation Module

Модуль для валидации JSON контрактов size hint.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SizeHintValidator,
    validate_size_hint_contract,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SizeHintValidator",
    # Functions
    "validate_size_hint_contract",
]
