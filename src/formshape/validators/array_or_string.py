"""
Contains the ArrayOrSpecificStringValidator.
"""
from typing import Any, Optional, Self

from formshape.types import ErrorFunction, MutationFunction, ValidationResult

from .array import ArrayValidator
from .base import BaseValidator, Dependent


class ArrayOrSpecificStringValidator(BaseValidator):
    """
    Validates array fields which may also hold one specific string instead of a list, e.g. ``"_any"`` for
    "no restriction". Any other string is rejected, lists are validated like by an ArrayValidator.
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
        allowed_string: str = "_any",
    ):
        super().__init__([], default_error_msg, mutation_func, on_error, dependent)
        self._internal_array_validator = ArrayValidator(of, default_error_msg, mutation_func, on_error, dependent)
        self.allowed_string = allowed_string
        self.of = of

    def required(self, msg: Optional[str] = None) -> Self:
        self._internal_array_validator.required(msg)
        return self

    def min_length(self, num: int, msg: Optional[str] = None) -> Self:
        """Enforces a minimum count (inclusive) of entries"""
        self._internal_array_validator.min_length(num, msg)
        return self

    def max_length(self, num: int, msg: Optional[str] = None) -> Self:
        """Enforces a maximum count (inclusive) of entries"""
        self._internal_array_validator.max_length(num, msg)
        return self

    def length_range(self, min_length: int, max_length: int, msg: Optional[str] = None) -> Self:
        """Enforces an entry count within an inclusive range"""
        self._internal_array_validator.length_range(min_length, max_length, msg)
        return self

    @property
    def is_required(self) -> bool:
        return self._internal_array_validator.is_required

    def get_default_value(self) -> list[Any]:
        return self._internal_array_validator.get_default_value()

    def validate(
        self, value: Any, other_values: Any = None, siblings: Any = None, recursion: bool = True
    ) -> ValidationResult:
        if value == self.allowed_string:
            return True, value
        if isinstance(value, str):
            return False, self._internal_array_validator.type_error_msg
        return self._internal_array_validator.validate(value, other_values, siblings, recursion)

    def validate_without_recursion(
        self, value: Any, other_values: Any = None, siblings: Any = None
    ) -> ValidationResult:
        """
        Validates the entries without descending into nested objects or arrays.
        """
        return self.validate(value, other_values, siblings, recursion=False)
