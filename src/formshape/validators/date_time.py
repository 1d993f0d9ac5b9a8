"""
Contains the DateTimeValidator which validates values of datetime-local fields.
"""
import re
from datetime import date, datetime, timezone
from typing import Any, Callable, Optional, Self

from formshape.messages import fill_placeholders
from formshape.types import ErrorFunction, MutationFunction
from formshape.utils.developer_input import ensure_value_is_datetime

from .base import BaseValidator, Dependent, StepResult

DATE_TIME_REGEX = re.compile(
    r"(?P<year>\d{4})-(?P<month>0[1-9]|1[0-2])-(?P<day>[0-2][0-9]|3[0-1])"
    r"T(?P<hour>[0-1][0-9]|2[0-3]):(?P<minute>[0-5][0-9])(?::(?P<second>[0-5][0-9]))?"
    r"(?:\.(?P<millisecond>\d{3}))?(?P<utc>Z)?"
)


def parse_date_time(text: str) -> Optional[datetime]:
    """
    Parses ``YYYY-MM-DDTHH:MM[:SS][.mmm][Z]``. Strings with a trailing ``Z`` result in UTC datetimes, all others in
    naive datetimes (local wall clock time). Returns None if the string doesn't match or names an impossible date.
    """
    match = DATE_TIME_REGEX.fullmatch(text)
    if match is None:
        return None
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
            int(match["millisecond"] or 0) * 1000,
            tzinfo=timezone.utc if match["utc"] else None,
        )
    except ValueError:
        return None


def coerce_date_time(value: Any) -> Optional[datetime]:
    """
    Best effort conversion of another field's value into a datetime. Numbers are taken as milliseconds since the
    epoch. Returns None if the value can't be interpreted as a point in time.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        parsed = parse_date_time(value)
        if parsed is not None:
            return parsed
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def as_instant(value: datetime) -> datetime:
    """Makes naive datetimes comparable with aware ones by interpreting them in local time"""
    return value if value.tzinfo is not None else value.astimezone()


def convert_date_to_input_string(value: datetime) -> str:
    """
    Formats a datetime as the value of a datetime-local input field, e.g. ``2021-03-04T05:06:07``.
    """
    return value.strftime("%Y-%m-%dT%H:%M:%S")


class DateTimeValidator(BaseValidator):
    """
    A validator that allows you to validate datetime-local fields. Accepts datetime objects and strings of the form
    ``YYYY-MM-DDTHH:MM[:SS][.mmm][Z]``, the validated value is always a datetime.
    """

    DEFAULT_INPUT_TYPE = "datetime-local"
    _COMPARISON_MSG_SUFFIX = "_date"

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

        def parse_value(value: Any, _other_values: Any, _siblings: Any) -> StepResult:
            if isinstance(value, datetime):
                return StepResult(True, default_error_msg, "date_time")
            parsed = parse_date_time(value) if isinstance(value, str) else None
            if parsed is None:
                return StepResult(False, default_error_msg, "date_time")
            return StepResult(True, default_error_msg, "date_time", changed_value=parsed)

        self._check_steps.append(parse_value)

    def _compare(self, compare: Callable[[Any, Any], bool], value: Any, other_value: Any) -> bool:
        """
        The other value is parsed into a datetime first. If that is impossible the check passes: the other field
        reports its own error.
        """
        other_date = coerce_date_time(other_value)
        if other_date is None:
            return True
        return super()._compare(compare, as_instant(value), as_instant(other_date))

    def min_date(self, min_date: datetime, msg: Optional[str] = None) -> Self:
        """
        Enforces a minimum date (inclusive).
        """
        ensure_value_is_datetime(min_date, "min_date", type(self).__name__, "date")
        context = {"date": str(min_date)}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: as_instant(value) >= as_instant(min_date), "min_date", error_msg, context)
        return self

    def max_date(self, max_date: datetime, msg: Optional[str] = None) -> Self:
        """
        Enforces a maximum date (inclusive).
        """
        ensure_value_is_datetime(max_date, "max_date", type(self).__name__, "date")
        context = {"date": str(max_date)}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: as_instant(value) <= as_instant(max_date), "max_date", error_msg, context)
        return self

    def date_range(self, min_date: datetime, max_date: datetime, msg: Optional[str] = None) -> Self:
        """
        Enforces an inclusive date range.
        """
        ensure_value_is_datetime(min_date, "date_range", type(self).__name__, "min_date")
        ensure_value_is_datetime(max_date, "date_range", type(self).__name__, "max_date")
        context = {"minDate": str(min_date), "maxDate": str(max_date)}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(
            lambda value: as_instant(min_date) <= as_instant(value) <= as_instant(max_date),
            "date_range",
            error_msg,
            context,
        )
        return self
