"""
Contains guards for the arguments of the validator builder methods. They run while the schema is defined and raise a
DeveloperInputError on malformed arguments, so that mistakes in a schema surface immediately instead of at
validation time.
"""
import math
import re
from datetime import datetime
from typing import Any

from typeguard import TypeCheckError, check_type

from formshape.errors import DeveloperInputError


def ensure_value_is_numeric(value: Any, validator_name: str, class_name: str, param_name: str) -> None:
    """
    Raises a DeveloperInputError unless `value` is an int or a float. Booleans and NaN are rejected as well.
    """
    try:
        check_type(value, int | float)
    except TypeCheckError as error:
        raise DeveloperInputError(validator_name, class_name, param_name, "a number") from error
    if isinstance(value, bool) or (isinstance(value, float) and math.isnan(value)):
        raise DeveloperInputError(validator_name, class_name, param_name, "a number")


def ensure_value_is_count(value: Any, validator_name: str, class_name: str, param_name: str) -> None:
    """
    Raises a DeveloperInputError unless `value` is a non-negative int.
    """
    try:
        check_type(value, int)
    except TypeCheckError as error:
        raise DeveloperInputError(validator_name, class_name, param_name, "a non-negative integer") from error
    if isinstance(value, bool) or value < 0:
        raise DeveloperInputError(validator_name, class_name, param_name, "a non-negative integer")


def ensure_value_is_regexp(value: Any, validator_name: str, class_name: str, param_name: str) -> None:
    """
    Raises a DeveloperInputError unless `value` is a compiled regular expression.
    """
    try:
        check_type(value, re.Pattern)
    except TypeCheckError as error:
        raise DeveloperInputError(validator_name, class_name, param_name, "a compiled re.Pattern") from error


def ensure_value_is_datetime(value: Any, validator_name: str, class_name: str, param_name: str) -> None:
    """
    Raises a DeveloperInputError unless `value` is a datetime object.
    """
    try:
        check_type(value, datetime)
    except TypeCheckError as error:
        raise DeveloperInputError(validator_name, class_name, param_name, "an instance of datetime") from error


def ensure_regex_matches(
    value: Any, expr: re.Pattern[str], validator_name: str, class_name: str, param_name: str, expectation: str
) -> None:
    """
    Raises a DeveloperInputError unless `value` is a string matching `expr`.
    """
    if not isinstance(value, str) or expr.fullmatch(value) is None:
        raise DeveloperInputError(validator_name, class_name, param_name, expectation)
