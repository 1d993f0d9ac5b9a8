import importlib

import pytest


class TestPackage:
    @pytest.mark.parametrize(
        "module_name",
        [
            pytest.param("formshape", id="package"),
            pytest.param("formshape.analysis", id="analysis"),
            pytest.param("formshape.defaults", id="defaults"),
            pytest.param("formshape.types", id="types"),
            pytest.param("formshape.utils", id="utils"),
            pytest.param("formshape.validators", id="validators"),
        ],
    )
    def test_import(self, module_name: str):
        assert importlib.import_module(module_name) is not None

    def test_public_names(self):
        formshape = importlib.import_module("formshape")
        for name in ["ObjectValidator", "ArrayValidator", "ValidationReport", "unpack_errors", "catalog"]:
            assert hasattr(formshape, name)
