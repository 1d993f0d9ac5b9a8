"""
Contains the NumberValidator. Its first check-step parses the raw input (a number or a numeric string with either
``.`` or ``,`` as decimal separator) into an int or a float, all subsequent steps work on the parsed number.
"""
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Optional, Self

from formshape.messages import fill_placeholders
from formshape.types import ErrorFunction, MutationFunction
from formshape.utils.developer_input import ensure_value_is_count, ensure_value_is_numeric

from .base import BaseValidator, Dependent, StepResult

NUMBER_REGEX = re.compile(r"-?[0-9]+([.,][0-9]+)?")
WHOLE_NUMBER_REGEX = re.compile(r"-?[0-9]+")


def _number_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def delocalize(value: Any) -> int | float:
    """
    Converts a number or a numeric string which may use ``,`` as decimal separator into an int or a float.
    Values without fractional digits become ints.
    """
    text = _number_text(value).replace(",", ".")
    if "." in text:
        return float(text)
    return int(text)


def is_numeric(value: Any, whole_number: bool = False) -> bool:
    """Returns True if `value` can be parsed by `delocalize`"""
    if isinstance(value, bool):
        return False
    expr = WHOLE_NUMBER_REGEX if whole_number else NUMBER_REGEX
    return expr.fullmatch(_number_text(value)) is not None


def to_fixed(value: Any, count: int) -> str:
    """
    Formats `value` as fixed-point string with exactly `count` decimal places, rounding half away from zero.
    """
    if isinstance(value, str):
        value = value.replace(",", ".")
    exponent = Decimal(1).scaleb(-count)
    return format(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP), "f")


class NumberValidator(BaseValidator):
    """
    A validator that allows you to validate numbers.
    """

    DEFAULT_INPUT_TYPE = "number"

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        whole_number: bool = False,
        default_value: Any = "",
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
    ):
        """
        Set `whole_number` to True to reject inputs with fractional digits.
        """
        super().__init__(default_value, default_error_msg, mutation_func, on_error, dependent)
        self.whole_number = whole_number
        self._min_num: Optional[int | float] = None
        self._max_num: Optional[int | float] = None
        msg_name = "whole_number" if whole_number else "number"

        def parse_number(value: Any, _other_values: Any, _siblings: Any) -> StepResult:
            if is_numeric(value, whole_number):
                return StepResult(True, default_error_msg, msg_name, changed_value=delocalize(value))
            return StepResult(False, default_error_msg, msg_name)

        self._check_steps.append(parse_number)

    @property
    def min_num(self) -> Optional[int | float]:
        """The lower bound set by `min` or `range`"""
        return self._min_num

    @property
    def max_num(self) -> Optional[int | float]:
        """The upper bound set by `max` or `range`"""
        return self._max_num

    def _compare(self, compare: Callable[[Any, Any], bool], value: Any, other_value: Any) -> bool:
        if isinstance(other_value, str) and is_numeric(other_value):
            other_value = delocalize(other_value)
        return super()._compare(compare, value, other_value)

    def min(self, num: int | float, msg: Optional[str] = None) -> Self:
        """
        Enforces a minimum number (inclusive).
        """
        ensure_value_is_numeric(num, "min", type(self).__name__, "num")
        context = {"num": num}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: value >= num, "min_number", error_msg, context)
        self._min_num = num
        return self

    def max(self, num: int | float, msg: Optional[str] = None) -> Self:
        """
        Enforces a maximum number (inclusive).
        """
        ensure_value_is_numeric(num, "max", type(self).__name__, "num")
        context = {"num": num}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: value <= num, "max_number", error_msg, context)
        self._max_num = num
        return self

    def range(self, min_num: int | float, max_num: int | float, msg: Optional[str] = None) -> Self:
        """
        Only allows numbers within an inclusive range.
        """
        ensure_value_is_numeric(min_num, "range", type(self).__name__, "min")
        ensure_value_is_numeric(max_num, "range", type(self).__name__, "max")
        context = {"min": min_num, "max": max_num}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: min_num <= value <= max_num, "number_range", error_msg, context)
        self._min_num = min_num
        self._max_num = max_num
        return self

    def positive(self, msg: Optional[str] = None) -> Self:
        """
        Only allows positive numbers (excluding 0).
        """
        self._add_check(lambda value: value > 0, "positive", msg)
        return self

    def negative(self, msg: Optional[str] = None) -> Self:
        """
        Only allows negative numbers (excluding 0).
        """
        self._add_check(lambda value: value < 0, "negative", msg)
        return self

    def decimal_places(self, count: int) -> Self:
        """
        Converts the number into a string with exactly `count` decimal places. This step never fails.
        Note that the validated value is a string afterwards, further numeric steps should be added before this one.
        """
        ensure_value_is_count(count, "decimal_places", type(self).__name__, "count")

        def format_decimal(value: Any, _other_values: Any, _siblings: Any) -> StepResult:
            return StepResult(True, changed_value=to_fixed(value, count))

        self._check_steps.append(format_decimal)
        return self
