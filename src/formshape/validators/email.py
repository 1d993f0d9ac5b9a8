"""
Contains the EmailValidator.
"""
import re
from typing import Any, Optional

from formshape.types import ErrorFunction, MutationFunction

from .base import Dependent
from .string import StringValidator

EMAIL_REGEX = re.compile(r".+@.+")


class EmailValidator(StringValidator):
    """
    A very simple email validator: anything with an ``@`` that has something on both sides.
    """

    DEFAULT_INPUT_TYPE = "email"

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
        self._add_check(lambda value: EMAIL_REGEX.search(str(value)) is not None, "email", default_error_msg)
