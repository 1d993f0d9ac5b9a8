"""
Contains the BooleanValidator.
"""
from typing import Any, Optional

from formshape.types import ErrorFunction, MutationFunction, ValidationResult

from .base import BaseValidator, Dependent, StepResult

_BOOLEAN_VALUES = ("true", "false")


class BooleanValidator(BaseValidator):
    """
    A validator that allows you to validate boolean fields. Accepts True/False as well as the strings
    ``"true"``/``"false"``. The validated value is the string ``"true"`` or ``"false"`` unless `real_bool` is set,
    in which case it is an actual bool.
    """

    DEFAULT_INPUT_TYPE = "checkbox"

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        default_value: Any = False,
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
        real_bool: bool = False,
    ):
        super().__init__(default_value, default_error_msg, mutation_func, on_error, dependent)
        self.real_bool = real_bool

        def coerce_boolean(value: Any, _other_values: Any, _siblings: Any) -> StepResult:
            if value is True or value is False or value in _BOOLEAN_VALUES:
                return StepResult(True, default_error_msg, "boolean", changed_value=value is True or value == "true")
            return StepResult(False, default_error_msg, "boolean")

        self._check_steps.append(coerce_boolean)

    def set_real_bool(self, new_real_bool: bool) -> None:
        """Switches between bool (True) and string (False) output"""
        self.real_bool = new_real_bool

    def validate(self, value: Any, other_values: Any = None, siblings: Any = None) -> ValidationResult:
        result = super().validate(value, other_values, siblings)
        if not result[0] or self.real_bool or not isinstance(result[1], bool):
            return result
        return True, "true" if result[1] else "false"
