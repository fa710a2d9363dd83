"""
labelset: Ordered, Immutable String Enumerations

Provides a single data structure, Enum, for named constant sets
(directions, states, roles) in code that wants more than a tuple of
strings but less than a class per constant.

ARCHITECTURAL GUARANTEE:
------------------------
An Enum:
    - Is validated once, at construction
    - Cannot be changed afterwards
    - Holds no external resources

All derivations produce new Enums.
"""

from .model import Enum
from .validation import DuplicateValueError, EnumValidationError, TypeValidationError

__version__ = "0.1.0"

__all__ = [
    "Enum",
    "EnumValidationError",
    "TypeValidationError",
    "DuplicateValueError",
]
