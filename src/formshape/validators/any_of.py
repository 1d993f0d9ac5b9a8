"""
Contains the AnyOfValidator, a "meta" validator which accepts a value if any of its options accepts it.
"""
from typing import Any, Optional, Sequence

from formshape.errors import DeveloperInputError
from formshape.messages import catalog
from formshape.types import ErrorFunction, MutationFunction, ValidationResult

from .base import BaseValidator, Dependent


class AnyOfValidator(BaseValidator):
    """
    Validates a value against a list of validators and succeeds with the result of the first one that matches.

    `pass_through_error_index` makes a failed validation return the result of that option instead of a generic
    message. `pass_through_of_index` / `pass_through_fields_index` expose the `of` / `fields` of an array / object
    option, so that key paths can be resolved through this validator.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        validator_options: Sequence[BaseValidator],
        default_value: Any = None,
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
        pass_through_error_index: Optional[int] = None,
        pass_through_of_index: Optional[int] = None,
        pass_through_fields_index: Optional[int] = None,
    ):
        super().__init__(default_value, default_error_msg, mutation_func, on_error, dependent)
        self.validator_options: tuple[BaseValidator, ...] = tuple(validator_options)
        self.pass_through_error_index = pass_through_error_index

        if pass_through_of_index is not None:
            option = self.validator_options[pass_through_of_index]
            if option.of is None:
                raise DeveloperInputError(
                    "pass_through_of_index", type(self).__name__, "the option", "an array validator"
                )
            self.of = option.of

        if pass_through_fields_index is not None:
            option = self.validator_options[pass_through_fields_index]
            if option.fields is None:
                raise DeveloperInputError(
                    "pass_through_fields_index", type(self).__name__, "the option", "an object validator"
                )
            self.fields = option.fields

    def set_pass_through_error_index(self, new_index: Optional[int]) -> None:
        """Sets the index of the option whose errors are returned if no option matches"""
        self.pass_through_error_index = new_index

    def get_default_value(self) -> Any:
        """
        Returns the configured default value or, if there is none, the default value of the first option.
        """
        if self._default_value is None:
            return self.validator_options[0].get_default_value()
        return super().get_default_value()

    def _validate_options(self, value: Any, other_values: Any, siblings: Any) -> ValidationResult:
        pre_validate = self._validate_independent(value, other_values, siblings)
        if not pre_validate[0]:
            return pre_validate

        passed_through_error: Optional[ValidationResult] = None
        for index, option in enumerate(self.validator_options):
            test = option.validate(value, other_values, siblings)
            if test[0]:
                return test
            if index == self.pass_through_error_index:
                passed_through_error = test

        if passed_through_error is not None:
            return passed_through_error
        if self._default_error_msg is not None:
            return False, self._default_error_msg
        return False, catalog.render("any_of") or self.default_error_msg

    def validate(self, value: Any, other_values: Any = None, siblings: Any = None) -> ValidationResult:
        """
        Returns the result of the first option that accepts the value. If a mutation function is set, it is applied
        to the value returned by that option.
        """
        if not self._is_required and self._is_empty(value):
            return True, value
        return self._evaluate(value, other_values, siblings, self._validate_options)
