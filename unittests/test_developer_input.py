import re
from datetime import date, datetime
from typing import Any

import pytest

from formshape import DeveloperInputError
from formshape.utils import (
    ensure_regex_matches,
    ensure_value_is_count,
    ensure_value_is_datetime,
    ensure_value_is_numeric,
    ensure_value_is_regexp,
)


class TestEnsureValueIsNumeric:
    @pytest.mark.parametrize("value", [pytest.param(3, id="int"), pytest.param(-1.5, id="float")])
    def test_accepted(self, value: Any):
        ensure_value_is_numeric(value, "min", "NumberValidator", "num")

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("3", id="numeric string"),
            pytest.param(None, id="none"),
            pytest.param(True, id="bool"),
            pytest.param(float("nan"), id="nan"),
        ],
    )
    def test_rejected(self, value: Any):
        with pytest.raises(DeveloperInputError) as error:
            ensure_value_is_numeric(value, "min", "NumberValidator", "num")
        assert str(error.value) == "Cannot add min to NumberValidator: num has to be a number."
        assert error.value.param_name == "num"

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            ensure_value_is_numeric("3", "min", "NumberValidator", "num")


class TestOtherGuards:
    def test_regexp(self):
        ensure_value_is_regexp(re.compile("a"), "regex", "StringValidator", "expr")
        with pytest.raises(DeveloperInputError):
            ensure_value_is_regexp("a", "regex", "StringValidator", "expr")

    def test_datetime(self):
        ensure_value_is_datetime(datetime(2021, 1, 1), "min_date", "DateTimeValidator", "date")
        with pytest.raises(DeveloperInputError):
            ensure_value_is_datetime(date(2021, 1, 1), "min_date", "DateTimeValidator", "date")

    def test_regex_matches(self):
        expr = re.compile(r"\d{4}")
        ensure_regex_matches("2021", expr, "min_date", "DateValidator", "date", "a year")
        with pytest.raises(DeveloperInputError) as error:
            ensure_regex_matches("20210", expr, "min_date", "DateValidator", "date", "a year")
        assert str(error.value) == "Cannot add min_date to DateValidator: date has to be a year."


class TestEnsureValueIsCount:
    @pytest.mark.parametrize("value", [pytest.param(0, id="zero"), pytest.param(2, id="positive")])
    def test_accepted(self, value: Any):
        ensure_value_is_count(value, "decimal_places", "NumberValidator", "count")

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(2.5, id="float"),
            pytest.param(-1, id="negative"),
            pytest.param(True, id="bool"),
            pytest.param("2", id="string"),
        ],
    )
    def test_rejected(self, value: Any):
        with pytest.raises(DeveloperInputError) as error:
            ensure_value_is_count(value, "decimal_places", "NumberValidator", "count")
        assert str(error.value) == (
            "Cannot add decimal_places to NumberValidator: count has to be a non-negative integer."
        )
