"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from domain.aggregates.category import Category
from infrastructure.event_sourced_repositories.catalog_application import CatalogApplication
from infrastructure.event_sourced_repositories.category_repository import (
    EventSourcedCategoryRepository,
)
from tests.mocks import MockCategoryRepository


@pytest.fixture
def valid_category() -> Category:
    """Create a valid Category aggregate for testing."""
    return Category.create(name="Category Name", description="Category Description")


@pytest.fixture
def category_repository() -> MockCategoryRepository:
    return MockCategoryRepository()


@pytest.fixture
def catalog_application() -> CatalogApplication:
    """In-memory event-sourced application."""
    return CatalogApplication(env={"PERSISTENCE_MODULE": "eventsourcing.popo"})


@pytest.fixture
def event_sourced_repository(
    catalog_application: CatalogApplication,
) -> EventSourcedCategoryRepository:
    return EventSourcedCategoryRepository(application=catalog_application)
