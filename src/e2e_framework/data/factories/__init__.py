"""Factories producing common entity shapes."""

from .test_data_factory import TestDataFactory

__all__ = ["TestDataFactory"]
