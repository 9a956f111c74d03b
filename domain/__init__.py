"""Domain layer exports."""

from domain.aggregates import Category
from domain.exceptions import (
    AggregateNotFoundError,
    DomainError,
    InfrastructureError,
    ValidationError,
)
from domain.validation import DomainValidation

__all__ = [
    "AggregateNotFoundError",
    "Category",
    "DomainError",
    "DomainValidation",
    "InfrastructureError",
    "ValidationError",
]
