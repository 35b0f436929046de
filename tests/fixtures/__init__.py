"""Shared value types for the test suite."""
