"""Tests for cronexpr.parser -- the field grammar and expression splitting."""

from __future__ import annotations

import pytest

from cronexpr import (
    AnyField,
    CronExpr,
    CronParseError,
    DescendingRangeError,
    EmptyExpressionError,
    FieldParseError,
    IncompleteExpressionError,
    InvalidStepError,
    ListField,
    ParseErrorKind,
    ParserConfig,
    RangeField,
    StepField,
    TooManyFieldsError,
    ValueField,
    is_valid,
    parse,
    parse_field,
)


# ---------------------------------------------------------------------------
# Whole expressions
# ---------------------------------------------------------------------------

class TestParseExpression:
    def test_mixed_fields(self):
        expr = CronExpr.parse("30 0-30/5 13-15,18\t* * 1-5")
        assert expr == CronExpr(
            second=ValueField(value=30),
            minute=StepField(base=RangeField(start=0, end=30), step=5),
            hour=ListField(items=[RangeField(start=13, end=15), ValueField(value=18)]),
            day=AnyField(),
            month=AnyField(),
            day_of_week=RangeField(start=1, end=5),
        )

    def test_all_wildcards_equal_default(self):
        assert parse("* * * * * *") == CronExpr()

    def test_runs_of_whitespace_separate_fields(self):
        assert parse("  0 \t 0\n\n12  * *   *  ") == parse("0 0 12 * * *")

    def test_module_function_and_classmethod_agree(self):
        assert parse("0 0 12 * * 1") == CronExpr.parse("0 0 12 * * 1")

    def test_identical_text_gives_equal_but_separate_values(self):
        a = parse("0 */15 9-17 * * 1-5")
        b = parse("0 */15 9-17 * * 1-5")
        assert a == b
        assert a is not b

    def test_day_31_in_february_is_accepted(self):
        expr = parse("0 0 0 31 2 *")
        assert expr.day == ValueField(value=31)
        assert expr.month == ValueField(value=2)

    def test_out_of_domain_value_accepted_by_default(self):
        assert parse("* * * * * 99").day_of_week == ValueField(value=99)


# ---------------------------------------------------------------------------
# Field grammar
# ---------------------------------------------------------------------------

class TestParseField:
    def test_star(self):
        assert parse_field("*") == AnyField()

    def test_value(self):
        assert parse_field("5") == ValueField(value=5)

    def test_value_with_leading_zero(self):
        assert parse_field("05") == ValueField(value=5)

    def test_max_value(self):
        assert parse_field("255") == ValueField(value=255)

    def test_range(self):
        assert parse_field("1-5") == RangeField(start=1, end=5)

    def test_single_value_range(self):
        assert parse_field("7-7") == RangeField(start=7, end=7)

    def test_step_over_all(self):
        assert parse_field("*/5") == StepField(base=AnyField(), step=5)

    def test_step_over_range(self):
        assert parse_field("0-30/5") == StepField(base=RangeField(start=0, end=30), step=5)

    def test_list_of_values(self):
        assert parse_field("1,3,5") == ListField(
            items=[ValueField(value=1), ValueField(value=3), ValueField(value=5)]
        )

    def test_list_of_range_and_value(self):
        field = parse_field("13-15,18")
        assert isinstance(field, ListField)
        assert field.items == (RangeField(start=13, end=15), ValueField(value=18))

    def test_comma_free_token_is_never_a_list(self):
        assert not isinstance(parse_field("5"), ListField)
        assert not isinstance(parse_field("1-5"), ListField)

    def test_range_and_equivalent_list_differ(self):
        assert parse_field("1-5") != parse_field("1,2,3,4,5")


class TestMalformedFields:
    @pytest.mark.parametrize("token", [
        "",
        "x",
        "+5",
        "-1",
        "1-",
        "1-2-3",
        "256",
        "1,",
        ",1",
        "1,,2",
        "1/5",
        "*/x",
        "a-b/5",
        "*/5/2",
        "**",
        "1-5,x",
    ])
    def test_rejected(self, token):
        with pytest.raises(FieldParseError) as exc_info:
            parse_field(token)
        assert exc_info.value.kind is ParseErrorKind.FIELD
        assert exc_info.value.token == token

    @pytest.mark.parametrize("token", ["0" * 5000 + "5", "9" * 5000, "1-" + "9" * 5000, "*/" + "1" * 5000])
    def test_oversized_numbers_rejected(self, token):
        with pytest.raises(FieldParseError):
            parse_field(token)

    def test_zero_padded_value_within_range(self):
        assert parse_field("0" * 5000 + "255") == ValueField(value=255)

    def test_standalone_field_error_has_no_position(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_field("x")
        assert exc_info.value.index == -1
        assert exc_info.value.field_name == ""

    def test_error_inside_expression_names_the_field(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse("* * * * * x")
        err = exc_info.value
        assert err.index == 5
        assert err.field_name == "day_of_week"
        assert err.token == "x"
        assert err.expression == "* * * * * x"
        assert "day_of_week" in str(err)

    def test_first_bad_field_is_reported(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse("* bad * * * also-bad")
        assert exc_info.value.index == 1
        assert exc_info.value.field_name == "minute"


# ---------------------------------------------------------------------------
# Steps and descending ranges
# ---------------------------------------------------------------------------

class TestInvalidStep:
    @pytest.mark.parametrize("token", ["*/0", "0-30/0", "*/00"])
    def test_zero_step_rejected(self, token):
        with pytest.raises(InvalidStepError) as exc_info:
            parse_field(token)
        assert exc_info.value.kind is ParseErrorKind.INVALID_STEP

    def test_zero_step_is_a_field_error(self):
        with pytest.raises(FieldParseError):
            parse("* */0 * * * *")

    def test_zero_step_with_bad_base_is_plain_field_error(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_field("x/0")
        assert not isinstance(exc_info.value, InvalidStepError)


class TestDescendingRanges:
    @pytest.mark.parametrize("token", ["5-1", "1,5-3", "30-0/5"])
    def test_rejected_by_default(self, token):
        with pytest.raises(DescendingRangeError) as exc_info:
            parse_field(token)
        assert exc_info.value.kind is ParseErrorKind.DESCENDING_RANGE

    def test_allowed_when_configured(self):
        config = ParserConfig(allow_descending_ranges=True)
        assert parse_field("5-1", config) == RangeField(start=5, end=1)
        assert parse("* * 22-2 * * *", config).hour == RangeField(start=22, end=2)


# ---------------------------------------------------------------------------
# Expression-level errors
# ---------------------------------------------------------------------------

class TestExpressionErrors:
    def test_empty(self):
        with pytest.raises(EmptyExpressionError) as exc_info:
            parse("")
        assert exc_info.value.kind is ParseErrorKind.EMPTY

    def test_whitespace_only_is_empty(self):
        with pytest.raises(EmptyExpressionError):
            parse(" \t\n")

    def test_incomplete(self):
        with pytest.raises(IncompleteExpressionError) as exc_info:
            parse("* * *")
        assert exc_info.value.kind is ParseErrorKind.INCOMPLETE
        assert exc_info.value.found == 3

    def test_five_field_unix_cron_is_incomplete(self):
        with pytest.raises(IncompleteExpressionError):
            parse("*/5 * * * *")

    def test_non_ascii_whitespace_does_not_separate(self):
        with pytest.raises(IncompleteExpressionError):
            parse("*\u00a0* * * * *")

    def test_too_many_fields(self):
        with pytest.raises(TooManyFieldsError) as exc_info:
            parse("0 0 12 * * * 2024")
        assert exc_info.value.kind is ParseErrorKind.TOO_MANY_FIELDS
        assert exc_info.value.found == 7

    def test_extra_fields_ignored_when_configured(self):
        config = ParserConfig(ignore_extra_fields=True)
        assert parse("0 0 12 * * * 2024 extra", config) == parse("0 0 12 * * *")

    def test_base_error_has_no_kind(self):
        assert CronParseError("boom").kind is None

    def test_every_raised_error_has_a_kind(self):
        for text in ["", "* *", "* * * * * * *", "* * * * * x", "* */0 * * * *", "* * 5-1 * * *"]:
            with pytest.raises(CronParseError) as exc_info:
                parse(text)
            assert isinstance(exc_info.value.kind, ParseErrorKind)

    def test_all_errors_are_value_errors(self):
        for text in ["", "* *", "* * * * * * *", "* * * * * x"]:
            with pytest.raises(ValueError):
                parse(text)


class TestDomainValidation:
    def test_day_of_week_out_of_range(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse("* * * * * 99", ParserConfig(validate_domains=True))
        assert exc_info.value.field_name == "day_of_week"
        assert "0-6" in str(exc_info.value)

    @pytest.mark.parametrize("text", [
        "60 * * * * *",
        "* 0-60 * * * *",
        "* * 24 * * *",
        "* * * 0 * *",
        "* * * * 1,13 *",
        "* * * * * 0-7/2",
    ])
    def test_out_of_range_leaves_rejected(self, text):
        with pytest.raises(FieldParseError):
            parse(text, ParserConfig(validate_domains=True))

    def test_in_range_expression_accepted(self):
        config = ParserConfig(validate_domains=True)
        expr = parse("59 0-59/15 23 1,31 12 0-6", config)
        assert expr.second == ValueField(value=59)


class TestIsValid:
    def test_valid(self):
        assert is_valid("30 0-30/5 13-15,18 * * 1-5")

    @pytest.mark.parametrize("text", ["", "* * *", "* * * * * x", "* */0 * * * *", "* * 5-1 * * *"])
    def test_invalid(self, text):
        assert not is_valid(text)

    def test_oversized_number_is_invalid(self):
        assert not is_valid("0" * 5000 + "5 * * * * *")

    def test_oversized_number_raises_parse_error(self):
        with pytest.raises(CronParseError):
            parse("* * * * * " + "7" * 5000)

    def test_respects_config(self):
        assert not is_valid("* * * * * 99", ParserConfig(validate_domains=True))

    def test_errors_share_a_base_class(self):
        with pytest.raises(CronParseError):
            parse("* * 5-1 * * *")
