"""
Label validation for labelset enumerations.

Every Enum is validated in a single pass before it exists:
    1. Type check  - every label must be a str
    2. Uniqueness  - no label may appear twice

The type check always runs first. Duplicate detection only runs once
every candidate is known to be a string.

ARCHITECTURAL RULE:
    Validation is all-or-nothing.
    Either every label passes and the caller gets a tuple back,
    or an EnumValidationError is raised and nothing is built.
"""

from typing import Any, Iterable, List, Tuple


class EnumValidationError(Exception):
    """
    Base class for failures raised while constructing an Enum.

    Properties:
        values: The offending values, deduplicated, in first-seen order
    """

    def __init__(self, message: str, values: Iterable[Any] = ()):
        super().__init__(message)
        self.values = tuple(values)


class TypeValidationError(EnumValidationError, TypeError):
    """Raised when one or more labels are not strings."""
    pass


class DuplicateValueError(EnumValidationError, ValueError):
    """Raised when one or more labels occur more than once."""
    pass


def find_invalid_labels(candidates: Iterable[Any]) -> List[Any]:
    """
    Collect every candidate that is not a string.

    Deduplication is by equality rather than hashing, so unhashable
    candidates (lists, dicts) are reported too.

    Args:
        candidates: Proposed labels

    Returns:
        Offending values in the order first encountered
    """
    invalid = []
    for candidate in candidates:
        if isinstance(candidate, str):
            continue
        # bool/int equality (True == 1) must not merge distinct entries
        if not any(type(seen) is type(candidate) and seen == candidate for seen in invalid):
            invalid.append(candidate)
    return invalid


def find_duplicate_labels(labels: Iterable[str]) -> List[str]:
    """
    Collect every label that occurs more than once.

    Each duplicate is reported once, ordered by the position of its
    first repeat.

    Example:
        ["A", "B", "B", "A"] -> ["B", "A"]
    """
    seen = set()
    duplicates = []
    for label in labels:
        if label in seen:
            if label not in duplicates:
                duplicates.append(label)
        else:
            seen.add(label)
    return duplicates


def validate_labels(candidates: Iterable[Any]) -> Tuple[str, ...]:
    """
    Validate proposed labels and return them as an immutable tuple.

    Args:
        candidates: Proposed labels, in the order they should be stored

    Returns:
        The labels as a tuple, original order preserved

    Raises:
        TypeValidationError: If any candidate is not a string
        DuplicateValueError: If any label repeats
    """
    candidates = list(candidates)

    invalid = find_invalid_labels(candidates)
    if invalid:
        raise TypeValidationError(
            "Enum values must be strings. Invalid entries: "
            + ", ".join(repr(value) for value in invalid),
            invalid,
        )

    duplicates = find_duplicate_labels(candidates)
    if duplicates:
        raise DuplicateValueError(
            f"Enum values must be unique. Duplicates found: {', '.join(duplicates)}",
            duplicates,
        )

    return tuple(candidates)


__all__ = [
    "EnumValidationError",
    "TypeValidationError",
    "DuplicateValueError",
    "find_invalid_labels",
    "find_duplicate_labels",
    "validate_labels",
]
