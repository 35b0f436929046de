"""Tests for the error taxonomy."""

import pytest

from equivalence.errors import (
    ComparisonError,
    ConfigurationError,
    InconsistentHashingError,
    UnexpectedTypeError,
    UnknownCategoryError,
    describe_type,
    is_configuration_error,
    is_type_mismatch,
)
from fixtures.models import Point


class TestUnexpectedTypeError:
    def test_for_type_with_class(self):
        error = UnexpectedTypeError.for_type(Point, 1)

        assert str(error) == 'Expected value of type "fixtures.models.Point", given "integer".'
        assert error.expected == "fixtures.models.Point"
        assert error.actual == "integer"
        assert error.details == {"expected": "fixtures.models.Point", "actual": "integer"}

    def test_for_type_with_object_value(self):
        error = UnexpectedTypeError.for_type("datetime.datetime", Point(1, 2))
        assert error.actual == "fixtures.models.Point"

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            raise UnexpectedTypeError.for_type(int, "x")


class TestHierarchy:
    @pytest.mark.parametrize("error_class,builtin", [
        (UnexpectedTypeError, TypeError),
        (InconsistentHashingError, ValueError),
        (UnknownCategoryError, ValueError),
        (ConfigurationError, ValueError),
    ])
    def test_subclasses(self, error_class, builtin):
        assert issubclass(error_class, ComparisonError)
        assert issubclass(error_class, builtin)

    def test_details_default_to_empty(self):
        assert ComparisonError("boom").details == {}

    def test_predicates(self):
        assert is_type_mismatch(UnexpectedTypeError("x"))
        assert not is_type_mismatch(ValueError("x"))
        assert is_configuration_error(ConfigurationError("x"))
        assert is_configuration_error(InconsistentHashingError("x"))
        assert not is_configuration_error(UnknownCategoryError("x"))


class TestDescribeType:
    @pytest.mark.parametrize("value,expected", [
        (None, "null"),
        (True, "boolean"),
        (1, "integer"),
        (1.0, "float"),
        ("a", "string"),
        ([], "array"),
        (Point(0, 0), "fixtures.models.Point"),
    ])
    def test_describe_type(self, value, expected):
        assert describe_type(value) == expected
