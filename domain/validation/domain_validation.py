"""Reusable validation rules shared by the domain aggregates."""

from __future__ import annotations

from domain.exceptions import ValidationError


class DomainValidation:
    """Stateless validation rules.

    Each rule returns ``None`` when the target satisfies it and raises
    :class:`~domain.exceptions.ValidationError` otherwise. The message names
    the offending field, so callers pass the field name as it should be shown
    to the user (e.g. ``"Name"``).
    """

    @staticmethod
    def not_null(target: object | None, field_name: str) -> None:
        if target is None:
            msg = f"{field_name} should not be null"
            raise ValidationError(msg)

    @staticmethod
    def not_null_or_empty(target: str | None, field_name: str) -> None:
        """Reject ``None``, empty and whitespace-only strings."""
        if target is None or not target.strip():
            msg = f"{field_name} should not be empty or null"
            raise ValidationError(msg)

    @staticmethod
    def min_length(target: str, min_length: int, field_name: str) -> None:
        if len(target) < min_length:
            msg = f"{field_name} should be at least {min_length} characters long"
            raise ValidationError(msg)

    @staticmethod
    def max_length(target: str, max_length: int, field_name: str) -> None:
        if len(target) > max_length:
            msg = f"{field_name} should be less or equal {max_length} characters long"
            raise ValidationError(msg)
