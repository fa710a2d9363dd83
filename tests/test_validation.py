"""
Tests for label validation.

These tests verify:
    - Non-string labels are rejected, each reported once
    - Repeated labels are rejected, each reported once
    - Type checking happens before duplicate checking
    - Valid input comes back as a tuple in the original order
"""

import pytest
from labelset.validation import (
    EnumValidationError,
    TypeValidationError,
    DuplicateValueError,
    find_invalid_labels,
    find_duplicate_labels,
    validate_labels,
)


class TestFindInvalidLabels:
    """Test detection of non-string candidates."""

    def test_all_strings(self):
        """Strings are never reported."""
        assert find_invalid_labels(["A", "B", ""]) == []

    def test_deduplicated_in_first_seen_order(self):
        """Each offending value appears once, in encounter order."""
        assert find_invalid_labels([2, "A", None, 2, None, 1.5]) == [2, None, 1.5]

    def test_unhashable_values(self):
        """Lists and dicts are reported without needing to be hashed."""
        assert find_invalid_labels([["A"], {"k": 1}, ["A"]]) == [["A"], {"k": 1}]

    def test_bool_and_int_kept_apart(self):
        """True == 1 in Python, but they are distinct offending entries."""
        assert find_invalid_labels([1, True, 1]) == [1, True]


class TestFindDuplicateLabels:
    """Test detection of repeated labels."""

    def test_no_duplicates(self):
        assert find_duplicate_labels(["A", "B", "C"]) == []

    def test_single_duplicate_reported_once(self):
        """A label repeated three times is listed once."""
        assert find_duplicate_labels(["A", "A", "A"]) == ["A"]

    def test_ordered_by_first_repeat(self):
        """Duplicates are listed in the order their repeats occur."""
        assert find_duplicate_labels(["A", "B", "B", "A"]) == ["B", "A"]


class TestValidateLabels:
    """Test the combined validation pass."""

    def test_returns_tuple_in_order(self):
        result = validate_labels(["NORTH", "EAST", "SOUTH", "WEST"])
        assert result == ("NORTH", "EAST", "SOUTH", "WEST")
        assert isinstance(result, tuple)

    def test_empty_is_valid(self):
        assert validate_labels([]) == ()

    def test_accepts_generators(self):
        assert validate_labels(label for label in "XYZ") == ("X", "Y", "Z")

    def test_type_error_lists_offenders(self):
        """TypeValidationError carries exactly the non-string values."""
        with pytest.raises(TypeValidationError) as exc_info:
            validate_labels(["A", 1, None, 1])
        assert exc_info.value.values == (1, None)
        assert str(exc_info.value) == "Enum values must be strings. Invalid entries: 1, None"

    def test_type_error_uses_repr(self):
        """Offending strings-in-disguise are rendered literally."""
        with pytest.raises(TypeValidationError) as exc_info:
            validate_labels([b"A"])
        assert "b'A'" in str(exc_info.value)

    def test_duplicate_error_lists_repeats(self):
        """DuplicateValueError carries exactly the repeated values."""
        with pytest.raises(DuplicateValueError) as exc_info:
            validate_labels(["A", "B", "C", "B"])
        assert exc_info.value.values == ("B",)
        assert str(exc_info.value) == "Enum values must be unique. Duplicates found: B"

    def test_type_checked_before_duplicates(self):
        """Input with both problems fails on type first."""
        with pytest.raises(TypeValidationError):
            validate_labels(["A", "A", 3])

    def test_error_hierarchy(self):
        """Errors are catchable as builtin types and as the common base."""
        assert issubclass(TypeValidationError, TypeError)
        assert issubclass(DuplicateValueError, ValueError)
        assert issubclass(TypeValidationError, EnumValidationError)
        assert issubclass(DuplicateValueError, EnumValidationError)
