"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when an entity invariant or input validation rule is violated."""


class AggregateNotFoundError(DomainError):
    """Raised when an aggregate is not found in the repository."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (event store, network, etc.)."""
