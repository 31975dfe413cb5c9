"""
Tests for student validation.

These tests verify:
1. Valid input becomes a StudentRecord with trimmed name and numeric score
2. Empty names, non-numbers and out-of-range scores are refused
3. Every record gets a fresh id
4. Id and clock sources can be injected
"""

import pytest
from datetime import datetime, timezone

from roster.domain import StudentRecord, ValidationError, ValidationErrorKind
from roster.store import RosterStore
from roster.validation import (
    EMPTY_NAME_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
    SCORE_MAX,
    SCORE_MIN,
    coerce_score,
    create_student_id,
    normalize_name,
    validate_score_range,
    validate_student,
)


# =============================================================================
# NAME TESTS
# =============================================================================

class TestNormalizeName:
    """Test name trimming and the empty-name rule."""

    def test_name_is_trimmed(self):
        """Surrounding whitespace is removed."""
        assert normalize_name("  Alice \t") == "Alice"

    def test_inner_whitespace_kept(self):
        """Only the ends are trimmed."""
        assert normalize_name(" Mary  Ann ") == "Mary  Ann"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_empty_name_rejected(self, raw):
        """Blank or missing names fail with EMPTY_NAME."""
        with pytest.raises(ValidationError) as exc_info:
            normalize_name(raw)

        assert exc_info.value.kind == ValidationErrorKind.EMPTY_NAME
        assert exc_info.value.message == EMPTY_NAME_MESSAGE


# =============================================================================
# SCORE COERCION TESTS
# =============================================================================

class TestCoerceScore:
    """Test conversion of raw scores to numbers."""

    def test_integer_string(self):
        """Whole-number strings become ints."""
        score = coerce_score("85")

        assert score == 85
        assert isinstance(score, int)

    def test_fractional_string(self):
        """Fractional strings become floats."""
        assert coerce_score("85.5") == 85.5

    def test_padded_string(self):
        """Whitespace around the number is ignored."""
        assert coerce_score(" 42 ") == 42

    def test_whole_float_becomes_int(self):
        """85.0 is stored as 85."""
        score = coerce_score(85.0)

        assert score == 85
        assert isinstance(score, int)

    def test_exponent_notation(self):
        """Anything float() accepts is a number."""
        assert coerce_score("1e2") == 100

    def test_numeric_input_passes_through(self):
        """Numbers are not stringified first."""
        assert coerce_score(70) == 70
        assert coerce_score(70.25) == 70.25

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "abc", "12abc", "5_0", "1_000", "nan", "inf", "-inf", None, True, False, [], object()],
    )
    def test_not_a_number(self, raw):
        """Anything that is not a finite number fails with NOT_A_NUMBER."""
        with pytest.raises(ValidationError) as exc_info:
            coerce_score(raw)

        assert exc_info.value.kind == ValidationErrorKind.NOT_A_NUMBER
        assert exc_info.value.message == NOT_A_NUMBER_MESSAGE

    def test_float_nan_rejected(self):
        """A real NaN float is not a score."""
        with pytest.raises(ValidationError) as exc_info:
            coerce_score(float("nan"))

        assert exc_info.value.kind == ValidationErrorKind.NOT_A_NUMBER


# =============================================================================
# RANGE TESTS
# =============================================================================

class TestScoreRange:
    """Test the closed [0, 100] range."""

    @pytest.mark.parametrize("score", [SCORE_MIN, 0.0, 50, 99.99, SCORE_MAX])
    def test_in_range(self, score):
        """Boundaries are inclusive."""
        validate_score_range(score)

    @pytest.mark.parametrize("score", [-1, -0.01, 100.01, 101, 1000])
    def test_out_of_range(self, score):
        """Scores outside the range fail with OUT_OF_RANGE."""
        with pytest.raises(ValidationError) as exc_info:
            validate_score_range(score)

        assert exc_info.value.kind == ValidationErrorKind.OUT_OF_RANGE
        assert exc_info.value.message == OUT_OF_RANGE_MESSAGE
        assert exc_info.value.value == score


# =============================================================================
# FULL VALIDATION TESTS
# =============================================================================

class TestValidateStudent:
    """Test the complete raw-input-to-record path."""

    def test_valid_student(self):
        """Valid input produces a record with trimmed name and numeric score."""
        record = validate_student("  Alice  ", "90")

        assert isinstance(record, StudentRecord)
        assert record.name == "Alice"
        assert record.score == 90
        assert record.id
        assert isinstance(record.created_at, datetime)

    def test_boundary_scores_accepted(self):
        """0 and 100 are valid scores."""
        assert validate_student("Zero", "0").score == 0
        assert validate_student("Full", "100").score == 100

    def test_ids_are_unique(self):
        """Every record gets a fresh id."""
        ids = {validate_student(f"Student {i}", i).id for i in range(100)}

        assert len(ids) == 100

    def test_record_is_immutable(self):
        """Records cannot be edited in place."""
        record = validate_student("Alice", 90)

        with pytest.raises(AttributeError):
            record.score = 10

    def test_name_checked_before_score(self):
        """With both fields bad, the name error wins (form order)."""
        with pytest.raises(ValidationError) as exc_info:
            validate_student("  ", "abc")

        assert exc_info.value.kind == ValidationErrorKind.EMPTY_NAME

    def test_not_a_number(self):
        """Non-numeric scores fail with NOT_A_NUMBER."""
        with pytest.raises(ValidationError) as exc_info:
            validate_student("Alice", "ninety")

        assert exc_info.value.kind == ValidationErrorKind.NOT_A_NUMBER

    def test_out_of_range(self):
        """Out-of-range scores fail with OUT_OF_RANGE."""
        with pytest.raises(ValidationError) as exc_info:
            validate_student("Alice", "101")

        assert exc_info.value.kind == ValidationErrorKind.OUT_OF_RANGE

    def test_error_string_names_kind(self):
        """str() of the error carries the kind for logs."""
        with pytest.raises(ValidationError, match=r"\[out_of_range\]"):
            validate_student("Alice", -5)

    def test_failed_validation_leaves_store_unchanged(self):
        """A refused student never reaches the roster."""
        store = RosterStore()
        store.append(validate_student("Bob", 70))
        before = store.all()

        for name, score in [("Alice", "150"), ("Alice", "x"), ("", "50")]:
            with pytest.raises(ValidationError):
                store.append(validate_student(name, score))

        assert store.all() == before

    def test_injected_id_and_clock(self):
        """Id and timestamp sources are replaceable."""
        fixed_time = datetime(2026, 1, 1, tzinfo=timezone.utc)

        record = validate_student(
            "Alice",
            "90",
            id_factory=lambda: "student-1",
            clock=lambda: fixed_time,
        )

        assert record.id == "student-1"
        assert record.created_at == fixed_time

    def test_default_id_is_uuid_string(self):
        """Default ids are UUID4 strings."""
        student_id = create_student_id()

        assert isinstance(student_id, str)
        assert len(student_id) == 36
