"""
Contains the exceptions raised by the validation framework.
Failing data never raises, it is reported through the returned validation result. The exceptions below signal
misuse of the framework itself: a malformed schema definition or a path that does not exist.
"""


class FormShapeError(Exception):
    """
    Base class of all exceptions raised by this package.
    """


class DeveloperInputError(FormShapeError, ValueError):
    """
    A builder method of a validator received an argument it cannot work with, e.g. a non-numeric length bound.
    These errors are raised while the schema is constructed, before any data is validated.
    """

    def __init__(self, validator_name: str, class_name: str, param_name: str, expectation: str):
        super().__init__(f"Cannot add {validator_name} to {class_name}: {param_name} has to be {expectation}.")
        self.validator_name = validator_name
        self.class_name = class_name
        self.param_name = param_name


class KeyNotFoundError(FormShapeError, LookupError):
    """
    A key path could not be resolved against a value tree.
    """

    def __init__(self, key_path: str | int):
        super().__init__(f"Could not find value for {key_path}")
        self.key_path = str(key_path)


class ValidatorNotFoundError(FormShapeError, LookupError):
    """
    A key path could not be resolved against a validator tree.
    """

    def __init__(self, key_path: str):
        super().__init__(f"Could not find validator for {key_path}")
        self.key_path = key_path
