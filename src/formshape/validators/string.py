"""
Contains the StringValidator.
"""
import re
from typing import Optional, Self

from formshape.messages import fill_placeholders
from formshape.utils.developer_input import ensure_value_is_numeric, ensure_value_is_regexp

from .base import BaseValidator


class StringValidator(BaseValidator):
    """
    A validator that allows you to validate string fields.
    """

    DEFAULT_INPUT_TYPE = "text"

    def regex(self, expr: re.Pattern[str], msg: Optional[str] = None) -> Self:
        """
        Matches the string against a compiled regular expression (``expr.search``).
        """
        ensure_value_is_regexp(expr, "regex", type(self).__name__, "expr")
        self._add_check(lambda value: expr.search(str(value)) is not None, "regex", msg)
        return self

    def min_length(self, num: int, msg: Optional[str] = None) -> Self:
        """
        Enforces a minimum length (inclusive) of the string.
        """
        ensure_value_is_numeric(num, "min_length", type(self).__name__, "num")
        context = {"num": num}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: len(str(value)) >= num, "min_length_string", error_msg, context)
        return self

    def max_length(self, num: int, msg: Optional[str] = None) -> Self:
        """
        Enforces a maximum length (inclusive) of the string.
        """
        ensure_value_is_numeric(num, "max_length", type(self).__name__, "num")
        context = {"num": num}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(lambda value: len(str(value)) <= num, "max_length_string", error_msg, context)
        return self

    def length_range(self, min_length: int, max_length: int, msg: Optional[str] = None) -> Self:
        """
        Enforces a string length between two numbers (both inclusive).
        """
        ensure_value_is_numeric(min_length, "length_range", type(self).__name__, "min")
        ensure_value_is_numeric(max_length, "length_range", type(self).__name__, "max")
        context = {"min": min_length, "max": max_length}
        error_msg = fill_placeholders(msg, context) if msg else None
        self._add_check(
            lambda value: min_length <= len(str(value)) <= max_length, "length_range_string", error_msg, context
        )
        return self
