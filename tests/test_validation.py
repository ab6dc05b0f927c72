"""
Unit tests for drivetrain validation.

Tests call the public validator and the internal checks with small
cog sets. No calculator state involved.
"""

import pytest

from cogshift.calculator.validation import (
    validate_drivetrain,
    _validate_cog_sets,
    _validate_target_ratio,
    _validate_initial,
    Severity,
    ValidationMessage,
    ValidationResult,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _codes(messages):
    """Extract code strings from a list of ValidationMessages."""
    return [m.code for m in messages]


def _severities(messages):
    """Extract {code: severity}."""
    return {m.code: m.severity for m in messages}


FRONT = [38, 30]
REAR = [28, 23, 19, 16]


class TestValidateDrivetrain:

    def test_valid_drivetrain(self):
        result = validate_drivetrain(FRONT, REAR, 1.6, initial=(38, 28))
        assert result.valid
        assert result.messages == []

    def test_empty_set_is_error(self):
        result = validate_drivetrain([], REAR, 1.6)
        assert not result.valid
        assert _codes(result.errors) == ["EMPTY_COG_SET"]
        assert "front" in result.errors[0].message

    def test_both_sets_empty(self):
        result = validate_drivetrain([], [], 1.6)
        assert "front or rear" in result.errors[0].message

    def test_invalid_initial_is_error(self):
        result = validate_drivetrain(FRONT, REAR, 1.6, initial=(50, 28))
        assert not result.valid
        assert "INVALID_INITIAL_COMBINATION" in _codes(result.errors)

    def test_warnings_keep_design_valid(self):
        result = validate_drivetrain([50, 40, 30], [20, 20], 2.0)
        assert result.valid
        assert set(_codes(result.warnings)) == {"DUPLICATE_COG", "FRONT_EXCEEDS_REAR"}

    def test_result_partitions(self):
        result = validate_drivetrain([0, 30], [28], 30 / 28)
        assert result.errors and not result.infos
        assert all(m.severity == Severity.ERROR for m in result.errors)


class TestCogSets:

    def test_non_positive_cog(self):
        messages = _validate_cog_sets([38, 0], REAR)
        assert _severities(messages) == {"NON_POSITIVE_COG": Severity.ERROR}
        assert "Front" in messages[0].message

    def test_duplicate_cog(self):
        messages = _validate_cog_sets(FRONT, [28, 23, 23, 16])
        assert _codes(messages) == ["DUPLICATE_COG"]
        assert "[23]" in messages[0].message

    def test_front_exceeds_rear(self):
        messages = _validate_cog_sets([50, 40, 30], [21, 19])
        assert _severities(messages) == {"FRONT_EXCEEDS_REAR": Severity.WARNING}

    def test_equal_counts_ok(self):
        assert _validate_cog_sets([50, 34], [21, 19]) == []


class TestTargetRatio:

    @pytest.mark.parametrize("ratio", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, ratio):
        messages = _validate_target_ratio(FRONT, REAR, ratio)
        assert _severities(messages) == {"NON_FINITE_RATIO": Severity.ERROR}

    @pytest.mark.parametrize("ratio", [0.0, -1.2])
    def test_non_positive(self, ratio):
        messages = _validate_target_ratio(FRONT, REAR, ratio)
        assert _codes(messages) == ["NON_POSITIVE_RATIO"]

    @pytest.mark.parametrize("ratio", [0.5, 3.0])
    def test_out_of_range_is_info(self, ratio):
        messages = _validate_target_ratio(FRONT, REAR, ratio)
        assert _severities(messages) == {"TARGET_OUT_OF_RANGE": Severity.INFO}

    @pytest.mark.parametrize("ratio", [30 / 28, 1.6, 38 / 16])
    def test_in_range(self, ratio):
        assert _validate_target_ratio(FRONT, REAR, ratio) == []

    def test_empty_sets_skip_range_check(self):
        assert _validate_target_ratio([], REAR, 1.6) == []


class TestInitial:

    def test_none_is_fine(self):
        assert _validate_initial(FRONT, REAR, None) == []

    def test_present(self):
        assert _validate_initial(FRONT, REAR, (30, 16)) == []

    @pytest.mark.parametrize("initial", [(50, 28), (38, 11), (28, 38)])
    def test_absent(self, initial):
        messages = _validate_initial(FRONT, REAR, initial)
        assert _codes(messages) == ["INVALID_INITIAL_COMBINATION"]
        assert messages[0].suggestion

    def test_empty_set_reported_once(self):
        result = validate_drivetrain([], REAR, 1.6, initial=(38, 28))
        assert _codes(result.messages) == ["EMPTY_COG_SET"]


class TestResultModel:

    def test_valid_flag_is_stored(self):
        msg = ValidationMessage(severity=Severity.INFO, code="X", message="x")
        result = ValidationResult(valid=True, messages=[msg])
        assert result.infos == [msg]
        assert result.warnings == []
