from uuid import UUID

import structlog
from returns.result import Failure, Result, Success

from application.dtos.category_dtos import (
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from application.dtos.errors import AppError
from application.mappers.category_mappers import CategoryMapper
from application.ports.repositories.category_repository import CategoryRepository
from domain.aggregates.category import Category
from domain.exceptions import AggregateNotFoundError, InfrastructureError, ValidationError

logger = structlog.get_logger()


class CreateCategoryUseCase:
    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    def execute(self, request: CreateCategoryRequest) -> Result[CategoryResponse, AppError]:
        try:
            logger.info("create_category_use_case_start", category_name=request.name)
            category = Category.create(
                name=request.name,
                description=request.description,
                is_active=request.is_active,
            )

            logger.info("saving_category", category_id=str(category.id))
            self.category_repository.save(category)

            logger.info("create_category_use_case_success", category_id=str(category.id))
            return Success(CategoryMapper.to_category_response(category))
        except ValidationError as e:
            logger.warning("validation_error", error=str(e))
            # Domain validation errors - client's fault (400 Bad Request)
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except InfrastructureError as e:
            logger.error("infrastructure_error", error=str(e))
            return Failure(AppError("infrastructure", str(e)))
        except Exception as e:
            logger.error(
                "unexpected_error_in_create_category_use_case",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Failure(AppError("internal_error", f"Unexpected error: {e!s}"))


class UpdateCategoryUseCase:
    """Rename a category and optionally replace its description."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    def execute(self, request: UpdateCategoryRequest) -> Result[CategoryResponse, AppError]:
        try:
            logger.info("update_category_use_case_start", category_id=str(request.category_id))
            category = self.category_repository.get_by_id(request.category_id)

            category.update(request.name, request.description)

            self.category_repository.save(category)
            logger.info("update_category_use_case_success", category_id=str(category.id))
            return Success(CategoryMapper.to_category_response(category))
        except AggregateNotFoundError as e:
            logger.warning(
                "category_not_found",
                category_id=str(request.category_id),
                error=str(e),
            )
            return Failure(AppError("not_found", f"Category not found: {e!s}"))
        except ValidationError as e:
            logger.warning("validation_error", category_id=str(request.category_id), error=str(e))
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except InfrastructureError as e:
            logger.error("infrastructure_error", error=str(e))
            return Failure(AppError("infrastructure", str(e)))


class ActivateCategoryUseCase:
    """Mark a category as active."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    def execute(self, category_id: UUID) -> Result[CategoryResponse, AppError]:
        try:
            category = self.category_repository.get_by_id(category_id)
            category.activate()
            self.category_repository.save(category)
            logger.info("category_activated", category_id=str(category_id))
            return Success(CategoryMapper.to_category_response(category))
        except AggregateNotFoundError as e:
            return Failure(AppError("not_found", f"Category not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", str(e)))


class DeactivateCategoryUseCase:
    """Mark a category as inactive."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    def execute(self, category_id: UUID) -> Result[CategoryResponse, AppError]:
        try:
            category = self.category_repository.get_by_id(category_id)
            category.deactivate()
            self.category_repository.save(category)
            logger.info("category_deactivated", category_id=str(category_id))
            return Success(CategoryMapper.to_category_response(category))
        except AggregateNotFoundError as e:
            return Failure(AppError("not_found", f"Category not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", str(e)))


class GetCategoryUseCase:
    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    def execute(self, category_id: UUID) -> Result[CategoryResponse, AppError]:
        try:
            category = self.category_repository.get_by_id(category_id)
            return Success(CategoryMapper.to_category_response(category))
        except AggregateNotFoundError as e:
            return Failure(AppError("not_found", f"Category not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", str(e)))
