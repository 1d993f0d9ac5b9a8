"""
Contains the DateValidator which validates date strings without a time component.
"""
import re
from datetime import date, datetime
from typing import Any, Optional, Self

from formshape.messages import fill_placeholders
from formshape.types import ErrorFunction, MutationFunction
from formshape.utils.developer_input import ensure_regex_matches

from .base import Dependent, StepResult
from .string import StringValidator

DATE_REGEX = re.compile(r"\d{4}-(0[1-9]|1[0-2])-([0-2][0-9]|3[0-1])")


class DateValidator(StringValidator):
    """
    Validates ``YYYY-MM-DD`` strings. `datetime.date` objects are accepted too and converted into that form.
    As the format has a fixed width, bounds and cross-field comparisons compare the strings directly.
    """

    DEFAULT_INPUT_TYPE = "date"

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        default_value: Any = "",
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
    ):
        super().__init__(default_value, default_error_msg, mutation_func, on_error, dependent)

        def match_date(value: Any, _other_values: Any, _siblings: Any) -> StepResult:
            if isinstance(value, date) and not isinstance(value, datetime):
                value = value.isoformat()
            success = isinstance(value, str) and DATE_REGEX.fullmatch(value) is not None
            return StepResult(success, default_error_msg, "date", changed_value=value)

        self._check_steps.append(match_date)

    def _ensure_date_string(self, value: Any, validator_name: str, param_name: str) -> None:
        ensure_regex_matches(value, DATE_REGEX, validator_name, type(self).__name__, param_name, "a date string")

    def min_date(self, min_date: str, msg: Optional[str] = None) -> Self:
        """
        Enforces a minimum date (inclusive).
        """
        self._ensure_date_string(min_date, "min_date", "date")
        context = {"date": min_date}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: value >= min_date, "min_date", error_msg, context)
        return self

    def max_date(self, max_date: str, msg: Optional[str] = None) -> Self:
        """
        Enforces a maximum date (inclusive).
        """
        self._ensure_date_string(max_date, "max_date", "date")
        context = {"date": max_date}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: value <= max_date, "max_date", error_msg, context)
        return self

    def date_range(self, min_date: str, max_date: str, msg: Optional[str] = None) -> Self:
        """
        Enforces an inclusive date range.
        """
        self._ensure_date_string(min_date, "date_range", "min_date")
        self._ensure_date_string(max_date, "date_range", "max_date")
        context = {"minDate": min_date, "maxDate": max_date}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: min_date <= value <= max_date, "date_range", error_msg, context)
        return self
