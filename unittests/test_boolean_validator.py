from typing import Any

import pytest

from formshape import BooleanValidator


class TestBooleanValidator:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(True, (True, "true"), id="true"),
            pytest.param(False, (True, "false"), id="false"),
            pytest.param("true", (True, "true"), id="true string"),
            pytest.param("false", (True, "false"), id="false string"),
            pytest.param("True", (False, "This field has to be a boolean"), id="case sensitive"),
            pytest.param(1, (False, "This field has to be a boolean"), id="one is not true"),
            pytest.param("yes", (False, "This field has to be a boolean"), id="yes"),
            pytest.param("", (True, ""), id="empty"),
        ],
    )
    def test_string_output(self, value: Any, expected: Any):
        assert BooleanValidator().validate(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(True, True, id="true"),
            pytest.param("true", True, id="true string"),
            pytest.param(False, False, id="false"),
            pytest.param("false", False, id="false string"),
        ],
    )
    def test_real_bool_output(self, value: Any, expected: bool):
        assert BooleanValidator(real_bool=True).validate(value) == (True, expected)

    def test_set_real_bool(self):
        validator = BooleanValidator()
        validator.set_real_bool(True)
        assert validator.validate("true") == (True, True)
        validator.set_real_bool(False)
        assert validator.validate("true") == (True, "true")

    def test_required_accepts_false(self):
        assert BooleanValidator().required().validate(False) == (True, "false")

    def test_one_of_on_coerced_value(self):
        validator = BooleanValidator(real_bool=True).one_of([True], "Please accept")
        assert validator.validate("true") == (True, True)
        assert validator.validate("false") == (False, "Please accept")

    def test_default_error_msg(self):
        assert BooleanValidator(default_error_msg="Yes or no").validate("maybe") == (False, "Yes or no")

    def test_defaults(self):
        validator = BooleanValidator()
        assert validator.get_default_value() is False
        assert validator.default_input_type == "checkbox"
