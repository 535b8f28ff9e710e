"""
Domain models and value objects.

Contains the validated SizeHintBounds model.
"""

from src.sizehint.domain.bounds import SizeHintBounds

__all__ = [
    "SizeHintBounds",
]
