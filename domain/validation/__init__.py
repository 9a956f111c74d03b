from .domain_validation import DomainValidation

__all__ = ["DomainValidation"]
