"""
Consolidated error types for the equivalence package.

Every error carries a message and a ``details`` dict for structured
reporting. The concrete errors also subclass the matching builtin so callers
can catch ``TypeError``/``ValueError`` without importing this module.
"""

from typing import Any, Dict, Optional, Union

from .categories import Category, classify, type_name


class ComparisonError(Exception):
    """
    Base exception for all equivalence and hashing errors.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize comparison error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnexpectedTypeError(ComparisonError, TypeError):
    """
    Raised when a value is not of the kind an operation requires.

    Lets callers tell "wrong kind of input" apart from "not equivalent".
    """

    def __init__(self, message: str,
                 expected: Optional[str] = None,
                 actual: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize unexpected type error.

        Args:
            message: Error message
            expected: Name of the expected type or category
            actual: Name of the type or category that was given
            details: Additional error context
        """
        super().__init__(message, details)
        self.expected = expected
        self.actual = actual

        self.details.update({
            'expected': expected,
            'actual': actual
        })

    @classmethod
    def for_type(cls, expected: Union[type, str], value: Any) -> "UnexpectedTypeError":
        """
        Build the error for ``value`` when a value of ``expected`` was required.

        Args:
            expected: Expected class or type name
            value: The offending value

        Returns:
            A ready-to-raise error
        """
        expected_name = expected if isinstance(expected, str) else type_name(expected)
        actual_name = describe_type(value)
        return cls(
            f'Expected value of type "{expected_name}", given "{actual_name}".',
            expected=expected_name,
            actual=actual_name
        )


class InconsistentHashingError(ComparisonError, ValueError):
    """
    Raised when an object compares itself but cannot hash itself.

    Such an object's hash code cannot be kept consistent with its
    equivalence, so hashing it is refused.
    """

    def __init__(self, message: str,
                 value_type: Optional[str] = None,
                 hasher_type: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.value_type = value_type
        self.hasher_type = hasher_type

        self.details.update({
            'value_type': value_type,
            'hasher_type': hasher_type
        })


class UnknownCategoryError(ComparisonError, ValueError):
    """Raised when classification produced a category the engine cannot dispatch."""

    def __init__(self, message: str,
                 category: Any = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.category = category
        self.details['category'] = category


class ConfigurationError(ComparisonError, ValueError):
    """Raised when a strategy configuration is invalid or cannot be resolved."""

    def __init__(self, message: str,
                 key: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.key = key
        self.details['key'] = key


def describe_type(value: Any) -> str:
    """Dotted class name for objects, category name for everything else."""
    category = classify(value)
    if category is Category.OBJECT:
        return type_name(type(value))
    return category.value


def is_type_mismatch(error: Exception) -> bool:
    """Check if error reports a value of the wrong kind."""
    return isinstance(error, UnexpectedTypeError)


def is_configuration_error(error: Exception) -> bool:
    """Check if error comes from an inconsistent setup rather than from input."""
    return isinstance(error, (ConfigurationError, InconsistentHashingError))
