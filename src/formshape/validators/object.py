"""
Contains the ObjectValidator. It validates mappings field by field and is also used as the root of every form shape.
"""
from typing import Any, Mapping, Optional, Self

from frozendict import frozendict

from formshape.messages import catalog
from formshape.types import ErrorFunction, MutationFunction, ValidationResult
from formshape.utils.key_path import is_sequence

from .base import BaseValidator, Dependent


# pylint: disable=too-many-instance-attributes
class ObjectValidator(BaseValidator):
    """
    A validator that allows you to validate object fields.

    Each declared field is validated in declaration order. The fields see the object validated so far as their
    siblings, so a field may compare itself with a field declared before it.
    If `drop_empty` is set, fields whose validated value is an empty string (or a list of nothing but empty strings)
    are removed from the result. If `drop_not_in_shape` is set, keys without a declared field are removed.
    """

    is_composite = True

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        fields: Mapping[str, BaseValidator],
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
        drop_empty: bool = True,
        drop_not_in_shape: bool = False,
    ):
        super().__init__({}, default_error_msg, mutation_func, on_error, dependent)
        self.fields: frozendict[str, BaseValidator] = fields if isinstance(fields, frozendict) else frozendict(fields)
        self.drop_empty = drop_empty
        self.drop_not_in_shape = drop_not_in_shape
        self._really_not_required = False

    def not_required(self) -> Self:
        """
        Makes the whole object optional: an empty or missing object passes without validating its fields.
        """
        self._is_required = False
        self._really_not_required = True
        return self

    def set_drop_empty(self, new_drop_empty: bool) -> None:
        """Makes the validator drop empty fields"""
        self.drop_empty = new_drop_empty

    def set_drop_not_in_shape(self, new_drop_not_in_shape: bool) -> None:
        """Makes the validator drop keys that are not declared as a field"""
        self.drop_not_in_shape = new_drop_not_in_shape

    @property
    def type_error_msg(self) -> str:
        """The message returned if the value is not a mapping"""
        if self._default_error_msg is not None:
            return self._default_error_msg
        return catalog.render("object") or self.default_error_msg

    def get_default_value(self) -> dict[str, Any]:
        return {field_name: validator.get_default_value() for field_name, validator in self.fields.items()}

    def _is_empty(self, value: Any) -> bool:
        if isinstance(value, Mapping):
            return len(value) == 0
        return super()._is_empty(value)

    def _keep_value(self, value: Any) -> tuple[bool, Any]:
        """
        Decides if a validated field value is kept in the result, returns (keep, value to store).
        """
        if not self.drop_empty:
            return True, value
        if is_sequence(value):
            filtered = [entry for entry in value if entry != ""]
            return len(filtered) > 0, filtered
        return value != "", value

    def _validate_fields(self, value: Any, other_values: Any, siblings: Any, recursion: bool) -> ValidationResult:
        """
        Checks the object itself first and then each declared field. All fields are validated, even after a failure.
        """
        pre_validate = self._validate_independent(value, other_values, siblings)
        if not pre_validate[0]:
            return pre_validate
        if self._is_empty(value):
            # an optional object given "" or [] is validated like an empty object
            value = {}
        elif not isinstance(value, Mapping):
            return False, self.type_error_msg

        # copy to leave the caller's object untouched
        test_value: dict[str, Any] = dict(value)
        tests: dict[str, ValidationResult] = {}
        all_ok = True
        for field_name, validator in self.fields.items():
            if not recursion and validator.is_composite:
                continue
            present = field_name in test_value
            test = validator.validate(test_value.get(field_name), other_values, test_value)
            tests[field_name] = test
            if not test[0]:
                all_ok = False
                continue
            if not all_ok:
                continue
            keep, new_value = self._keep_value(test[1])
            if keep and (present or new_value is not None):
                test_value[field_name] = new_value
            else:
                test_value.pop(field_name, None)

        if all_ok and self.drop_not_in_shape:
            for key in [key for key in test_value if key not in self.fields]:
                del test_value[key]

        return (True, test_value) if all_ok else (False, tests)

    def validate(
        self, value: Any, other_values: Any = None, siblings: Any = None, recursion: bool = True
    ) -> ValidationResult:
        """
        Validates the object and all of its fields. On failure the payload maps each validated field name to its
        result. If `recursion` is False, fields that are objects or arrays themselves are skipped.
        """
        if self._really_not_required and self._is_empty(value):
            return True, value
        return self._evaluate(
            value,
            other_values,
            siblings,
            lambda obj, others, sibling_values: self._validate_fields(obj, others, sibling_values, recursion),
        )

    def validate_without_recursion(
        self, value: Any, other_values: Any = None, siblings: Any = None
    ) -> ValidationResult:
        """
        Validates the object's fields except for those that are objects or arrays themselves.
        """
        return self.validate(value, other_values, siblings, recursion=False)
