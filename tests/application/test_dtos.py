"""Tests for DTOs and mappers."""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from application.dtos.category_dtos import CreateCategoryRequest, UpdateCategoryRequest
from application.dtos.errors import AppError
from application.mappers.category_mappers import CategoryMapper
from domain.aggregates.category import Category


class TestCategoryRequests:
    def test_create_request_defaults_to_active(self) -> None:
        request = CreateCategoryRequest(name="Movies", description="Feature films")
        assert request.is_active is True

    def test_create_request_missing_required_field(self) -> None:
        """Test that missing required field raises ValidationError."""
        with pytest.raises(ValidationError):
            CreateCategoryRequest(name="Movies")  # type: ignore[call-arg]

    def test_update_request_description_is_optional(self) -> None:
        request = UpdateCategoryRequest(category_id=uuid4(), name="Movies")
        assert request.description is None


class TestCategoryMapper:
    def test_to_category_response(self, valid_category: Category) -> None:
        response = CategoryMapper.to_category_response(valid_category)

        assert response.category_id == valid_category.id
        assert response.name == valid_category.name
        assert response.description == valid_category.description
        assert response.is_active is valid_category.is_active
        assert response.created_at == valid_category.created_at


def test_app_error_str_is_message() -> None:
    error = AppError("validation", "Validation error: Name should not be empty or null")
    assert error.category == "validation"
    assert str(error) == "Validation error: Name should not be empty or null"
