"""Repository interfaces (ports) for the application layer."""

from abc import ABC, abstractmethod
from uuid import UUID

from domain.aggregates.category import Category


class CategoryRepository(ABC):
    """Interface for category repository.

    The repository raises domain exceptions to allow proper error handling
    at the application layer:
    - AggregateNotFoundError: When a category is not found
    - InfrastructureError: When infrastructure operations fail (event store, etc.)
    """

    @abstractmethod
    def save(self, category: Category) -> None:
        """Saves a category entity to the repository.

        Raises:
            InfrastructureError: If the save operation fails.

        """

    @abstractmethod
    def get_by_id(self, category_id: UUID) -> Category:
        """Retrieves a category entity by its ID.

        Raises:
            AggregateNotFoundError: If the category does not exist.
            InfrastructureError: If the retrieval operation fails.

        """
