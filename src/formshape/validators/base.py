"""
Contains the BaseValidator which implements the evaluation loop shared by all validator kinds, together with the
types describing a single check-step and a dependent validator step.
"""
import copy
import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple, Optional, Self, Sequence, TypeAlias

from frozendict import frozendict

from formshape.messages import GENERIC_ERROR_MSG, catalog, fill_placeholders
from formshape.types import (
    ArrayCheckFunction,
    CheckFunction,
    DependentPredicate,
    ErrorFunction,
    InputType,
    MutationFunction,
    ValidationResult,
)
from formshape.utils.key_path import get_field_value_from_key_string, is_sequence

_logger = logging.getLogger(__name__)


class _Unchanged:
    """Marker type for check-steps that leave the value as it is"""

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED = _Unchanged()


@dataclass(frozen=True)
class StepResult:
    """
    The outcome of a single check-step. It is either a failure (``success`` is False), a success which leaves the
    value unchanged, or a success which replaces the value by ``changed_value`` for all subsequent steps.
    """

    success: bool
    error_msg: Optional[str] = None
    msg_name: Optional[str] = None
    translation_context: frozendict[str, Any] = field(default_factory=frozendict)
    changed_value: Any = UNCHANGED

    @property
    def value_changed(self) -> bool:
        """True if the step replaces the value"""
        return self.success and self.changed_value is not UNCHANGED


class DependentStep(NamedTuple):
    """
    If ``predicate(<value at path>, value)`` holds, the validation is delegated entirely to ``validator``.
    The path is resolved against the `other_values` passed to `validate`.
    """

    path: str
    predicate: DependentPredicate
    validator: "BaseValidator"


Dependent: TypeAlias = "DependentStep | tuple[str, DependentPredicate, BaseValidator] | Sequence[DependentStep]"


def _normalize_dependent(dependent: Optional[Dependent]) -> tuple[DependentStep, ...]:
    if not dependent:
        return ()
    if isinstance(dependent, tuple) and len(dependent) == 3 and isinstance(dependent[0], str):
        return (DependentStep(*dependent),)
    return tuple(DependentStep(*step) for step in dependent)


def _contains(allowed_values: Sequence[Any], value: Any) -> bool:
    return value in allowed_values


# pylint: disable=too-many-instance-attributes, too-many-public-methods
class BaseValidator:
    """
    The validator all other validators extend. It is probably not very useful on its own.

    A validator holds an ordered list of check-steps. `validate` runs them one after another on the value and stops
    at the first failing step. Steps may replace the value, the replacement is handed to all subsequent steps and ends
    up in the result. Missing values (None, '', empty lists) skip all steps: they fail if the validator is required
    and pass unchanged otherwise.
    """

    DEFAULT_INPUT_TYPE: InputType = "text"
    #: Composite validators contain child validators, they are skipped when validating without recursion.
    is_composite: bool = False
    #: The item validator of array-like validators, used to resolve key paths
    of: Optional["BaseValidator"] = None
    #: The field validators of object-like validators, used to resolve key paths
    fields: Optional[frozendict[str, "BaseValidator"]] = None
    #: appended to the message names of the comparison steps
    _COMPARISON_MSG_SUFFIX = ""

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        default_value: Any = "",
        default_error_msg: Optional[str] = None,
        mutation_func: Optional[MutationFunction] = None,
        on_error: Optional[ErrorFunction] = None,
        dependent: Optional[Dependent] = None,
    ):
        self._default_value = default_value
        self._default_error_msg = default_error_msg
        self._mutation_func = mutation_func
        self._on_error = on_error
        self._dependent = _normalize_dependent(dependent)
        self._default_input_type: InputType = self.DEFAULT_INPUT_TYPE
        self._check_steps: list[CheckFunction] = []
        self._is_required = False
        self._required_error: Optional[str] = None

    @property
    def is_required(self) -> bool:
        """True if missing values are rejected"""
        return self._is_required

    @property
    def default_input_type(self) -> InputType:
        """The input type hint for fields validated by this validator"""
        return self._default_input_type

    @property
    def default_error_msg(self) -> str:
        """The message used if a failing step provides no message of its own"""
        return self._default_error_msg if self._default_error_msg is not None else GENERIC_ERROR_MSG

    @property
    def dependent(self) -> tuple[DependentStep, ...]:
        """The dependent steps, evaluated in order"""
        return self._dependent

    def set_default_input_type(self, new_default_input_type: InputType) -> None:
        """Sets the input type hint for fields validated by this validator"""
        self._default_input_type = new_default_input_type

    def set_default_value(self, new_default_value: Any) -> None:
        """Sets the default value of this validator"""
        self._default_value = new_default_value

    def set_default_error_msg(self, new_default_error_msg: str) -> None:
        """Sets the fallback error message of this validator"""
        self._default_error_msg = new_default_error_msg

    def set_mutation_func(self, new_mutation_func: Optional[MutationFunction]) -> None:
        """Sets the function applied to the value after a successful validation"""
        self._mutation_func = new_mutation_func

    def set_on_error(self, new_on_error: Optional[ErrorFunction]) -> None:
        """Sets the callback invoked after a failed validation"""
        self._on_error = new_on_error

    def set_dependent(self, new_dependent: Optional[Dependent]) -> None:
        """Sets the dependent step(s) of this validator"""
        self._dependent = _normalize_dependent(new_dependent)

    def _add_check(
        self,
        check: Callable[[Any], bool],
        msg_name: Optional[str],
        error_msg: Optional[str] = None,
        translation_context: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Registers a predicate on the value as a check-step.
        """
        context: frozendict[str, Any] = frozendict(translation_context or {})

        def check_step(value: Any, _other_values: Any, _siblings: Any) -> StepResult:
            return StepResult(bool(check(value)), error_msg, msg_name, context)

        self._check_steps.append(check_step)

    def _resolve_message(self, step_result: StepResult) -> str:
        if step_result.error_msg is not None:
            return step_result.error_msg
        rendered = catalog.render(step_result.msg_name, step_result.translation_context)
        if rendered is not None:
            return rendered
        return self.default_error_msg

    @property
    def required_error_msg(self) -> str:
        """The message returned for missing values of a required validator"""
        if self._required_error is not None:
            return self._required_error
        return catalog.render("required") or self.default_error_msg

    def required(self, msg: Optional[str] = None) -> Self:
        """
        Enforces a value to be set.
        """
        self._is_required = True
        self._required_error = msg
        return self

    def always_false(self, msg: Optional[str] = None) -> Self:
        """
        Makes the validation fail in all cases (as long as a value is given). This is useful for dependent validators.
        """
        self._add_check(lambda _: False, "always_false", msg)
        return self

    def _compare(self, compare: Callable[[Any, Any], bool], value: Any, other_value: Any) -> bool:
        """
        Compares the value with the value of another field. Values that can't be compared fail the check.
        """
        try:
            return bool(compare(value, other_value))
        except TypeError:
            return False

    def _add_comparison(
        self, msg_name: str, compare: Callable[[Any, Any], bool], key: str | int, msg: Optional[str], sibling: bool
    ) -> Self:
        if sibling:
            msg_name = f"{msg_name}_sibling"
        msg_name += self._COMPARISON_MSG_SUFFIX
        context: frozendict[str, Any] = frozendict({"name": key})
        error_msg = fill_placeholders(msg, context) if msg is not None else None

        def check_step(value: Any, other_values: Any, siblings: Any) -> StepResult:
            other_value = get_field_value_from_key_string(key, siblings if sibling else other_values)
            return StepResult(self._compare(compare, value, other_value), error_msg, msg_name, context)

        self._check_steps.append(check_step)
        return self

    def greater_than(self, name: str, msg: Optional[str] = None) -> Self:
        """Checks if the value is greater than the value of the field at `name` (resolved against other_values)"""
        return self._add_comparison("greater_than", operator.gt, name, msg, sibling=False)

    def less_than(self, name: str, msg: Optional[str] = None) -> Self:
        """Checks if the value is less than the value of the field at `name` (resolved against other_values)"""
        return self._add_comparison("less_than", operator.lt, name, msg, sibling=False)

    def greater_or_equal_to(self, name: str, msg: Optional[str] = None) -> Self:
        """Checks if the value is greater than or equal to the value of the field at `name`"""
        return self._add_comparison("greater_or_equal_to", operator.ge, name, msg, sibling=False)

    def less_or_equal_to(self, name: str, msg: Optional[str] = None) -> Self:
        """Checks if the value is less than or equal to the value of the field at `name`"""
        return self._add_comparison("less_or_equal_to", operator.le, name, msg, sibling=False)

    def greater_than_sibling(self, key: str | int, msg: Optional[str] = None) -> Self:
        """Checks if the value is greater than the value of its sibling `key`"""
        return self._add_comparison("greater_than", operator.gt, key, msg, sibling=True)

    def less_than_sibling(self, key: str | int, msg: Optional[str] = None) -> Self:
        """Checks if the value is less than the value of its sibling `key`"""
        return self._add_comparison("less_than", operator.lt, key, msg, sibling=True)

    def greater_or_equal_to_sibling(self, key: str | int, msg: Optional[str] = None) -> Self:
        """Checks if the value is greater than or equal to the value of its sibling `key`"""
        return self._add_comparison("greater_or_equal_to", operator.ge, key, msg, sibling=True)

    def less_or_equal_to_sibling(self, key: str | int, msg: Optional[str] = None) -> Self:
        """Checks if the value is less than or equal to the value of its sibling `key`"""
        return self._add_comparison("less_or_equal_to", operator.le, key, msg, sibling=True)

    def _add_array_membership(
        self, msg_name: str, key: str, check_fn: Optional[ArrayCheckFunction], msg: Optional[str], sibling: bool
    ) -> Self:
        membership = check_fn if check_fn is not None else _contains

        def check_step(value: Any, other_values: Any, siblings: Any) -> StepResult:
            compare = get_field_value_from_key_string(key, siblings if sibling else other_values)
            if is_sequence(compare):
                return StepResult(bool(membership(compare, value)), msg, msg_name)
            _logger.warning(
                "Attempted to use %s validator on the non array field '%s'. This is not possible.", msg_name, key
            )
            return StepResult(False, msg, msg_name)

        self._check_steps.append(check_step)
        return self

    def one_of_array_field_values(
        self, key: str, check_fn: Optional[ArrayCheckFunction] = None, msg: Optional[str] = None
    ) -> Self:
        """
        Checks if the value is contained in the array found at `key` (resolved against other_values).
        A custom `check_fn(allowed_values, value)` may replace the default membership test.
        """
        return self._add_array_membership("one_of_array_field_values", key, check_fn, msg, sibling=False)

    def one_of_array_sibling_field_values(
        self, key: str, check_fn: Optional[ArrayCheckFunction] = None, msg: Optional[str] = None
    ) -> Self:
        """
        Checks if the value is contained in the array found in its sibling `key`.
        """
        return self._add_array_membership("one_of_array_sibling_field_values", key, check_fn, msg, sibling=True)

    def one_of(self, values: Sequence[Any], msg: Optional[str] = None) -> Self:
        """
        Checks if the value is one of the provided values.
        """
        allowed = list(values)
        self._add_check(
            lambda value: value in allowed, "one_of", msg, {"allowed": ", ".join(str(value) for value in allowed)}
        )
        return self

    def _is_empty(self, value: Any) -> bool:
        """Returns True if `value` counts as missing for the required check"""
        if value is None:
            return True
        if isinstance(value, str):
            return value == ""
        return is_sequence(value) and len(value) == 0

    def _validate_dependent(self, value: Any, other_values: Any, siblings: Any) -> Optional[ValidationResult]:
        """
        Returns the result of the first dependent step whose predicate matches, None if none matches.
        """
        for step in self._dependent:
            dependent_value = get_field_value_from_key_string(step.path, other_values)
            if step.predicate(dependent_value, value):
                _logger.debug("Dependent step on '%s' matched, delegating to %s", step.path, step.validator)
                return step.validator.validate(value, other_values, siblings)
        return None

    def _validate_independent(self, value: Any, other_values: Any, siblings: Any) -> ValidationResult:
        """
        Runs the required check and all check-steps.
        """
        if self._is_empty(value):
            if self._is_required:
                return False, self.required_error_msg
            return True, value
        for check_step in self._check_steps:
            step_result = check_step(value, other_values, siblings)
            if not step_result.success:
                return False, self._resolve_message(step_result)
            if step_result.value_changed:
                value = step_result.changed_value
        return True, value

    def _evaluate(
        self,
        value: Any,
        other_values: Any,
        siblings: Any,
        independent: Callable[[Any, Any, Any], ValidationResult],
    ) -> ValidationResult:
        """
        Delegates to a matching dependent step or runs `independent`, then applies on_error / mutation_func.
        """
        other_values = {} if other_values is None else other_values
        siblings = {} if siblings is None else siblings
        result = self._validate_dependent(value, other_values, siblings)
        if result is None:
            result = independent(value, other_values, siblings)
        if not result[0]:
            if self._on_error is not None:
                self._on_error(value, other_values)
        elif self._mutation_func is not None:
            result = (True, self._mutation_func(result[1], other_values, siblings))
        return result

    def validate(self, value: Any, other_values: Any = None, siblings: Any = None) -> ValidationResult:
        """
        Validates `value`. `other_values` is the complete form data, `siblings` the data of the enclosing object or
        array. Returns ``(True, <validated value>)`` or ``(False, <error message>)``.
        """
        return self._evaluate(value, other_values, siblings, self._validate_independent)

    def get_default_value(self) -> Any:
        """
        Returns the default value of this validator. Each call returns a fresh copy.
        """
        return copy.deepcopy(self._default_value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(required={self._is_required}, steps={len(self._check_steps)})"
