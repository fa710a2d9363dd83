"""
Core Enum Object

Defines the Ordered Value Set: an immutable, ordered collection of
unique string labels.

An Enum is:
    - Validated once, at construction (see labelset.validation)
    - Frozen immediately afterwards
    - Ordered: position drives first/last/next/previous/compare
    - Self-describing: every label is readable as an attribute of itself

ARCHITECTURAL RULE:
    Queries never mutate.
    Derivations (filter) build a brand-new, revalidated Enum.
    Absence is signalled with None, never with an exception.
"""

import functools
import random
import warnings
from dataclasses import FrozenInstanceError, dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterator, List, Mapping, Optional, Tuple

from .validation import validate_labels


_MISSING = object()


@dataclass(init=False, repr=False, unsafe_hash=True)
class Enum:
    """
    Immutable, ordered set of unique string labels.

    Example:
        directions = Enum.of("NORTH", "EAST", "SOUTH", "WEST")

        directions.NORTH               -> "NORTH"
        directions.next("EAST")        -> "SOUTH"
        directions.previous("NORTH")   -> None
        directions.compare("NORTH", "WEST") -> -3

    Properties:
        values:
            The backing sequence, as a tuple, in construction order

        _positions:
            Read-only label -> index mapping used for lookups

    INVARIANTS:
        - Every label is a str
        - Labels are pairwise distinct
        - No attribute can be assigned, deleted or added after __init__
    """

    values: Tuple[str, ...]
    _positions: Mapping[str, int] = field(compare=False)

    def __init__(self, *labels: str):
        values = validate_labels(labels)
        object.__setattr__(self, "values", values)
        object.__setattr__(
            self,
            "_positions",
            MappingProxyType({label: index for index, label in enumerate(values)}),
        )
        self._warn_shadowed_labels()

    @classmethod
    def of(cls, *labels: str) -> "Enum":
        """Build an Enum from the given labels. Equivalent to the constructor."""
        return cls(*labels)

    def _warn_shadowed_labels(self) -> None:
        for label in self.values:
            if label in self.__dict__ or hasattr(type(self), label):
                warnings.warn(
                    f"Enum label {label!r} is shadowed by an Enum attribute; "
                    f"it is only reachable through the query methods",
                    UserWarning,
                    stacklevel=3,
                )

    # Attribute access and immutability

    def __getattr__(self, name: str) -> str:
        positions = self.__dict__.get("_positions")
        if positions is not None and name in positions:
            return self.values[positions[name]]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | {label for label in self.values if label.isidentifier()})

    def __reduce__(self):
        return (type(self), self.values)

    # Size and position

    @property
    def length(self) -> int:
        """Number of labels."""
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def first(self) -> Optional[str]:
        """First label, or None if the Enum is empty."""
        return self.values[0] if self.values else None

    @property
    def last(self) -> Optional[str]:
        """Last label, or None if the Enum is empty."""
        return self.values[-1] if self.values else None

    def get_by_index(self, index: int) -> Optional[str]:
        """
        Retrieve the label at a position.

        Negative indices count as out of range; they do not wrap.

        Returns:
            The label, or None if index is outside 0 <= index < length
        """
        if 0 <= index < len(self.values):
            return self.values[index]
        return None

    def has(self, value: Any) -> bool:
        """True if value is one of the labels."""
        return self.index_of(value) != -1

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def index_of(self, value: Any) -> int:
        """Zero-based position of value, or -1 if it is not a label."""
        if not isinstance(value, str):
            return -1
        return self._positions.get(value, -1)

    def next(self, value: Any) -> Optional[str]:
        """
        Label immediately after value.

        Returns:
            The following label, or None if value is absent or last
        """
        index = self.index_of(value)
        if index == -1 or index == len(self.values) - 1:
            return None
        return self.values[index + 1]

    def previous(self, value: Any) -> Optional[str]:
        """
        Label immediately before value.

        Returns:
            The preceding label, or None if value is absent or first
        """
        index = self.index_of(value)
        if index <= 0:
            return None
        return self.values[index - 1]

    def compare(self, first_value: Any, second_value: Any) -> Optional[int]:
        """
        Signed distance between two labels: position(first) - position(second).

        IMPORTANT:
            This is not a sort key. It returns None when either value
            is absent, so callers must handle that case before using
            the result as a number.
        """
        first_index = self.index_of(first_value)
        second_index = self.index_of(second_value)
        if first_index == -1 or second_index == -1:
            return None
        return first_index - second_index

    def is_first(self, value: Any) -> bool:
        return len(self.values) > 0 and self.values[0] == value

    def is_last(self, value: Any) -> bool:
        return len(self.values) > 0 and self.values[-1] == value

    def random(self, rng: Optional[random.Random] = None) -> Optional[str]:
        """
        Pick one label uniformly at random.

        Args:
            rng: Optional random.Random for reproducible draws
                 (defaults to the module-level generator)

        Returns:
            A label, or None if the Enum is empty
        """
        if not self.values:
            return None
        if rng is None:
            return random.choice(self.values)
        return rng.choice(self.values)

    # Rendering

    def __str__(self) -> str:
        formatted = ", ".join(f'"{value}"' for value in self.values)
        return f"{type(self).__name__}({formatted})"

    __repr__ = __str__

    # Traversal

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def filter(self, predicate: Callable[[str], Any]) -> "Enum":
        """New Enum holding only the labels for which predicate is truthy."""
        return type(self)(*(value for value in self.values if predicate(value)))

    def some(self, predicate: Callable[[str], Any]) -> bool:
        return any(predicate(value) for value in self.values)

    def every(self, predicate: Callable[[str], Any]) -> bool:
        return all(predicate(value) for value in self.values)

    def map(self, callback: Callable[[str], Any]) -> List[Any]:
        """
        Apply callback to every label.

        The result is a plain list, not an Enum: mapped values need not
        be unique strings.
        """
        return [callback(value) for value in self.values]

    def reduce(self, callback: Callable[[Any, str], Any], initial: Any = _MISSING) -> Any:
        """
        Left fold over the labels in order.

        Without an initial value the first label seeds the accumulator
        and folding starts from the second.

        Raises:
            TypeError: If the Enum is empty and no initial value is given
        """
        if initial is _MISSING:
            if not self.values:
                raise TypeError("reduce() of empty Enum with no initial value")
            return functools.reduce(callback, self.values)
        return functools.reduce(callback, self.values, initial)

    def for_each(self, callback: Callable[[str], Any]) -> None:
        for value in self.values:
            callback(value)


__all__ = ["Enum"]
