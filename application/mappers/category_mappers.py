from application.dtos.category_dtos import CategoryResponse
from domain.aggregates.category import Category


class CategoryMapper:
    """Mapper for converting Category domain objects to DTOs."""

    @staticmethod
    def to_category_response(category: Category) -> CategoryResponse:
        """Map a Category aggregate to a CategoryResponse DTO.

        Args:
            category: The Category aggregate to map

        Returns:
            CategoryResponse: The mapped response DTO

        """
        return CategoryResponse(
            category_id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )
