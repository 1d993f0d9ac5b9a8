"""
Contains all validator kinds
"""
from .any_of import AnyOfValidator
from .array import ArrayValidator
from .array_or_string import ArrayOrSpecificStringValidator
from .base import UNCHANGED, BaseValidator, Dependent, DependentStep, StepResult
from .boolean import BooleanValidator
from .date import DateValidator
from .date_time import DateTimeValidator, convert_date_to_input_string
from .email import EmailValidator
from .number import NumberValidator
from .object import ObjectValidator
from .phone import PhoneNumberValidator
from .string import StringValidator
