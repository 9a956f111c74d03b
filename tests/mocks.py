"""Mock implementations for testing."""

from __future__ import annotations

from uuid import UUID

from application.ports.repositories.category_repository import CategoryRepository
from domain.aggregates.category import Category
from domain.exceptions import AggregateNotFoundError, InfrastructureError


class MockCategoryRepository(CategoryRepository):
    """Mock implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self.categories: dict[UUID, Category] = {}
        self.save_called = False
        self.get_by_id_called = False

    def save(self, category: Category) -> None:
        self.categories[category.id] = category
        self.save_called = True

    def get_by_id(self, category_id: UUID) -> Category:
        self.get_by_id_called = True
        if category_id not in self.categories:
            msg = f"Category with id {category_id} not found"
            raise AggregateNotFoundError(msg)
        return self.categories[category_id]


class FailingCategoryRepository(MockCategoryRepository):
    """Repository whose event store is unavailable on save."""

    def save(self, category: Category) -> None:
        msg = "Failed to save category: connection refused"
        raise InfrastructureError(msg)
