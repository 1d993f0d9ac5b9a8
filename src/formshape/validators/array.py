"""
Contains the ArrayValidator which validates lists by validating each entry with a single item validator.
"""
import math
from typing import Any, Optional, Self

from formshape.messages import catalog, fill_placeholders
from formshape.types import ErrorFunction, MutationFunction, ValidationResult
from formshape.utils.developer_input import ensure_value_is_numeric
from formshape.utils.key_path import is_sequence

from .base import BaseValidator, Dependent


class ArrayValidator(BaseValidator):
    """
    A validator that allows you to validate array fields.
    `of` is the validator every entry of the array is validated with.
    """

    DEFAULT_INPUT_TYPE = "select"
    is_composite = True

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        of: BaseValidator,
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
    ):
        super().__init__([], default_error_msg, mutation_func, on_error, dependent)
        self.of = of
        self.min_child_count: int = 0
        self.max_child_count: int | float = math.inf

    @property
    def type_error_msg(self) -> str:
        """The message returned if the value is not a list"""
        if self._default_error_msg is not None:
            return self._default_error_msg
        return catalog.render("array") or self.default_error_msg

    def _length_message(self, msg: Optional[str], msg_name: str, context: dict[str, Any]) -> str:
        if msg is not None:
            return fill_placeholders(msg, context)
        return catalog.render(msg_name, context) or self.default_error_msg

    def min_length(self, num: int, msg: Optional[str] = None) -> Self:
        """
        Enforces a minimum count (inclusive) of entries. A minimum above 0 makes the field required.
        """
        ensure_value_is_numeric(num, "min_length", type(self).__name__, "num")
        context = {"num": num}
        error_msg = self._length_message(msg, "min_length_array", context)
        self._add_check(lambda values: not is_sequence(values) or len(values) >= num, "min_length_array", error_msg)
        if num > 0:
            self.required(error_msg)
        self.min_child_count = int(num)
        return self

    def max_length(self, num: int, msg: Optional[str] = None) -> Self:
        """
        Enforces a maximum count (inclusive) of entries.
        """
        ensure_value_is_numeric(num, "max_length", type(self).__name__, "num")
        context = {"num": num}
        error_msg = self._length_message(msg, "max_length_array", context)
        self._add_check(lambda values: not is_sequence(values) or len(values) <= num, "max_length_array", error_msg)
        self.max_child_count = num
        return self

    def length_range(self, min_length: int, max_length: int, msg: Optional[str] = None) -> Self:
        """
        Enforces an entry count within an inclusive range.
        """
        ensure_value_is_numeric(min_length, "length_range", type(self).__name__, "min")
        ensure_value_is_numeric(max_length, "length_range", type(self).__name__, "max")
        context = {"min": min_length, "max": max_length}
        error_msg = self._length_message(msg, "length_range_array", context)
        self._add_check(
            lambda values: not is_sequence(values) or min_length <= len(values) <= max_length,
            "length_range_array",
            error_msg,
        )
        if min_length > 0:
            self.required(error_msg)
        self.min_child_count = int(min_length)
        self.max_child_count = max_length
        return self

    def get_default_value(self) -> list[Any]:
        """
        Returns `min_child_count` entries, each one a fresh default value of the item validator.
        """
        return [self.of.get_default_value() for _ in range(self.min_child_count)]

    def _validate_entries(self, values: Any, other_values: Any, siblings: Any, recursion: bool) -> ValidationResult:
        """
        Checks the array itself (required, length) first and then each entry.
        """
        pre_validate = self._validate_independent(values, other_values, siblings)
        if not pre_validate[0]:
            return pre_validate
        if not is_sequence(values):
            return False, self.type_error_msg

        if recursion or not self.of.is_composite:
            test_func = self.of.validate
        else:
            test_func = self.of.validate_without_recursion  # type:ignore[attr-defined]

        # copy to leave the caller's list untouched
        test_values = list(values)
        tests: list[ValidationResult] = []
        all_ok = True
        for index, value in enumerate(test_values):
            test = test_func(value, other_values, test_values)
            tests.append(test)
            if not test[0]:
                all_ok = False
            elif all_ok:
                test_values[index] = test[1]
        return (True, test_values) if all_ok else (False, tests)

    def validate(
        self, value: Any, other_values: Any = None, siblings: Any = None, recursion: bool = True
    ) -> ValidationResult:
        """
        Validates the list and all of its entries. On failure the payload is a list with one result per entry.
        If `recursion` is False, entries that are objects or arrays themselves are validated without recursion.
        """
        return self._evaluate(
            value,
            other_values,
            siblings,
            lambda values, others, sibling_values: self._validate_entries(values, others, sibling_values, recursion),
        )

    def validate_without_recursion(
        self, value: Any, other_values: Any = None, siblings: Any = None
    ) -> ValidationResult:
        """
        Validates the entries without descending into nested objects or arrays.
        """
        return self.validate(value, other_values, siblings, recursion=False)
