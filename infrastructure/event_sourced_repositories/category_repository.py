from uuid import UUID

from eventsourcing.application import AggregateNotFoundError as EventStoreNotFoundError
from eventsourcing.application import Application

from application.ports.repositories.category_repository import CategoryRepository
from domain.aggregates.category import Category
from domain.exceptions import AggregateNotFoundError, InfrastructureError


class EventSourcedCategoryRepository(CategoryRepository):
    """Event-sourced implementation of the CategoryRepository."""

    def __init__(self, application: Application) -> None:
        self.application = application

    def save(self, category: Category) -> None:
        """Save a category entity to the event-sourced repository.

        Raises:
            InfrastructureError: If the event store operation fails.

        """
        try:
            self.application.save(category)
        except Exception as e:
            raise InfrastructureError(f"Failed to save category: {e!s}") from e

    def get_by_id(self, category_id: UUID) -> Category:
        """Retrieve Category by rebuilding from event history.

        Raises:
            AggregateNotFoundError: If the category does not exist.
            InfrastructureError: If the event store operation fails.

        """
        try:
            category = self.application.repository.get(category_id)
        except EventStoreNotFoundError as e:
            raise AggregateNotFoundError(f"Category {category_id} not found") from e
        except Exception as e:
            raise InfrastructureError(f"Failed to retrieve category {category_id}: {e!s}") from e

        if not isinstance(category, Category):
            raise AggregateNotFoundError(f"Category {category_id} not found")
        return category
