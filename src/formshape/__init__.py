"""
This package enables you to declare the shape of nested form data with composable validators. A shape validates the
data, normalizes it, derives default values and reports errors in a tree mirroring the input.
"""

from .analysis import ValidationReport, find_validator, find_validator_and_siblings, unpack_errors
from .defaults import complete_default_values
from .errors import DeveloperInputError, FormShapeError, KeyNotFoundError, ValidatorNotFoundError
from .messages import DEFAULT_MESSAGES, MessageCatalog, catalog, fill_placeholders
from .utils.key_path import get_field_value_from_key_string, optional_field_value, set_field_value_from_key_string
from .validators import (
    AnyOfValidator,
    ArrayOrSpecificStringValidator,
    ArrayValidator,
    BaseValidator,
    BooleanValidator,
    DateTimeValidator,
    DateValidator,
    DependentStep,
    EmailValidator,
    NumberValidator,
    ObjectValidator,
    PhoneNumberValidator,
    StepResult,
    StringValidator,
    convert_date_to_input_string,
)
