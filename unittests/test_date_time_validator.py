from datetime import date, datetime, timezone
from typing import Any

import pytest

from formshape import DateTimeValidator, DateValidator, DeveloperInputError, convert_date_to_input_string


class TestDateTimeParsing:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("2021-03-04T05:06", datetime(2021, 3, 4, 5, 6), id="minutes"),
            pytest.param("2021-03-04T05:06:07", datetime(2021, 3, 4, 5, 6, 7), id="seconds"),
            pytest.param("2021-03-04T05:06:07.123", datetime(2021, 3, 4, 5, 6, 7, 123000), id="milliseconds"),
            pytest.param(
                "2021-03-04T05:06:07.123Z",
                datetime(2021, 3, 4, 5, 6, 7, 123000, tzinfo=timezone.utc),
                id="utc",
            ),
            pytest.param(datetime(2020, 1, 1, 12), datetime(2020, 1, 1, 12), id="datetime object"),
        ],
    )
    def test_valid(self, value: Any, expected: datetime):
        assert DateTimeValidator().validate(value) == (True, expected)

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("yesterday", id="text"),
            pytest.param("2021-03-04", id="date only"),
            pytest.param("2021-02-30T00:00", id="impossible date"),
            pytest.param("2021-03-04T24:00", id="impossible hour"),
            pytest.param("2021-03-04 05:06", id="space separator"),
            pytest.param(1614834360000, id="number"),
        ],
    )
    def test_invalid(self, value: Any):
        assert DateTimeValidator().validate(value) == (False, "This field must contain a date/time")

    def test_default_error_msg(self):
        assert DateTimeValidator(default_error_msg="When?").validate("soon") == (False, "When?")

    def test_default_input_type(self):
        assert DateTimeValidator().default_input_type == "datetime-local"


class TestDateTimeBounds:
    def test_min_date(self):
        validator = DateTimeValidator().min_date(datetime(2021, 1, 1))
        assert validator.validate("2021-01-01T00:00") == (True, datetime(2021, 1, 1))
        assert validator.validate("2020-12-31T23:59") == (False, "This date must be at least 2021-01-01 00:00:00")

    def test_max_date(self):
        validator = DateTimeValidator().max_date(datetime(2021, 1, 1), "Until {{date}}")
        assert validator.validate("2021-01-01T00:00")[0] is True
        assert validator.validate("2021-01-01T00:01") == (False, "Until 2021-01-01 00:00:00")

    def test_date_range(self):
        validator = DateTimeValidator().date_range(datetime(2021, 1, 1), datetime(2021, 12, 31))
        assert validator.validate("2021-06-01T12:00")[0] is True
        assert validator.validate("2022-01-01T00:00") == (
            False,
            "This date must be between 2021-01-01 00:00:00 and 2021-12-31 00:00:00",
        )

    @pytest.mark.parametrize(
        "build, expected_message",
        [
            pytest.param(
                lambda: DateTimeValidator().min_date("2021-01-01"),
                "Cannot add min_date to DateTimeValidator: date has to be an instance of datetime.",
                id="min date",
            ),
            pytest.param(
                lambda: DateTimeValidator().date_range(datetime(2021, 1, 1), None),
                "Cannot add date_range to DateTimeValidator: max_date has to be an instance of datetime.",
                id="date range",
            ),
        ],
    )
    def test_developer_input(self, build: Any, expected_message: str):
        with pytest.raises(DeveloperInputError) as error:
            build()
        assert str(error.value) == expected_message


class TestDateTimeComparisons:
    def test_greater_than(self):
        validator = DateTimeValidator().greater_than("start")
        assert validator.validate("2021-01-02T00:00", {"start": "2021-01-01T00:00"})[0] is True
        assert validator.validate("2021-01-01T00:00", {"start": "2021-01-01T00:00"}) == (
            False,
            "This date must be after the value for start",
        )

    def test_other_value_may_be_a_datetime(self):
        validator = DateTimeValidator().less_or_equal_to("end")
        assert validator.validate("2021-01-01T00:00", {"end": datetime(2021, 1, 1)})[0] is True
        assert validator.validate("2021-01-02T00:00", {"end": date(2021, 1, 1)}) == (
            False,
            "This date must be the value of end at the latest",
        )

    def test_sibling(self):
        validator = DateTimeValidator().greater_or_equal_to_sibling("start")
        assert validator.validate("2021-01-01T00:00", {}, {"start": "2021-01-02T00:00"}) == (
            False,
            "This date must be at least the value for its sibling start",
        )

    @pytest.mark.parametrize(
        "other_value",
        [
            pytest.param("garbage", id="unparseable string"),
            pytest.param(None, id="none"),
            pytest.param("", id="empty"),
        ],
    )
    def test_unparseable_other_value_passes(self, other_value: Any):
        validator = DateTimeValidator().greater_than("start")
        assert validator.validate("2021-01-01T00:00", {"start": other_value}) == (True, datetime(2021, 1, 1))

    def test_utc_values_compare_by_instant(self):
        validator = DateTimeValidator().less_than("end")
        other_values = {"end": "2021-01-01T12:00:00.000Z"}
        assert validator.validate("2021-01-01T11:59:00.000Z", other_values)[0] is True
        assert validator.validate("2021-01-01T12:01:00.000Z", other_values)[0] is False


def test_convert_date_to_input_string():
    assert convert_date_to_input_string(datetime(2021, 3, 4, 5, 6, 7)) == "2021-03-04T05:06:07"


class TestDateValidator:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("2021-03-04", (True, "2021-03-04"), id="date string"),
            pytest.param(date(2021, 3, 4), (True, "2021-03-04"), id="date object"),
            pytest.param("2021-13-01", (False, "This field must contain a date"), id="impossible month"),
            pytest.param("2021-03-04T00:00", (False, "This field must contain a date"), id="with time"),
            pytest.param("04.03.2021", (False, "This field must contain a date"), id="other format"),
            pytest.param("", (True, ""), id="empty"),
        ],
    )
    def test_validate(self, value: Any, expected: Any):
        assert DateValidator().validate(value) == expected

    def test_bounds(self):
        assert DateValidator().min_date("2023-01-01").validate("2020-01-01") == (
            False,
            "This date must be at least 2023-01-01",
        )
        assert DateValidator().max_date("2020-01-01", "Banana {{date}}").validate("2024-01-01") == (
            False,
            "Banana 2020-01-01",
        )
        validator = DateValidator().date_range("2020-01-01", "2022-01-01")
        assert validator.validate("2021-06-30") == (True, "2021-06-30")
        assert validator.validate("2022-01-02") == (False, "This date must be between 2020-01-01 and 2022-01-01")

    def test_bounds_apply_to_date_objects(self):
        assert DateValidator().min_date("2023-01-01").validate(date(2024, 1, 1)) == (True, "2024-01-01")

    @pytest.mark.parametrize(
        "build, expected_message",
        [
            pytest.param(
                lambda: DateValidator().min_date("banana"),
                "Cannot add min_date to DateValidator: date has to be a date string.",
                id="min date",
            ),
            pytest.param(
                lambda: DateValidator().max_date(date(2020, 1, 1)),
                "Cannot add max_date to DateValidator: date has to be a date string.",
                id="max date object",
            ),
            pytest.param(
                lambda: DateValidator().date_range("2020-01-01", "banana"),
                "Cannot add date_range to DateValidator: max_date has to be a date string.",
                id="date range",
            ),
        ],
    )
    def test_developer_input(self, build: Any, expected_message: str):
        with pytest.raises(DeveloperInputError) as error:
            build()
        assert str(error.value) == expected_message

    def test_sibling_comparison_is_lexical(self):
        validator = DateValidator().greater_than_sibling("start")
        assert validator.validate("2021-10-01", {}, {"start": "2021-09-30"}) == (True, "2021-10-01")
        assert validator.validate("2021-09-01", {}, {"start": "2021-09-30"})[0] is False

    def test_default_input_type(self):
        assert DateValidator().default_input_type == "date"
