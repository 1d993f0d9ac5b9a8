"""
Contains the PhoneNumberValidator.
"""
from .string import StringValidator


class PhoneNumberValidator(StringValidator):
    """
    A StringValidator which sets the default input type to "tel" and does nothing else.
    """

    DEFAULT_INPUT_TYPE = "tel"
