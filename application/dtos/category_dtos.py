from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class CreateCategoryRequest(BaseModel):
    name: str
    description: str
    is_active: bool = True


class UpdateCategoryRequest(BaseModel):
    category_id: UUID
    name: str
    description: str | None = None


class CategoryResponse(BaseModel):
    category_id: UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime
