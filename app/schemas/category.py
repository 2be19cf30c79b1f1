"""Category and AI model API schemas."""

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(default=None, min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=50)
    image_url: str | None = Field(default=None, max_length=2048)
    description: str | None = None
    show_in_header: bool = False
    show_in_footer: bool = False
    show_in_showcase: bool = False
    show_in_featured: bool = False


class CategoryUpdateRequest(BaseModel):
    NOT_NULL: ClassVar[frozenset[str]] = frozenset(
        {"name", "slug", "show_in_header", "show_in_footer", "show_in_showcase", "show_in_featured"}
    )

    name: str | None = Field(default=None, min_length=1, max_length=100)
    slug: str | None = Field(default=None, min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=50)
    image_url: str | None = Field(default=None, max_length=2048)
    description: str | None = None
    show_in_header: bool | None = None
    show_in_footer: bool | None = None
    show_in_showcase: bool | None = None
    show_in_featured: bool | None = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k not in self.NOT_NULL}


class CategoryMoveRequest(BaseModel):
    """Move a category one place up or down in the display order."""

    direction: Literal["up", "down"]


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    icon: str | None = None
    image_url: str | None = None
    description: str | None = None
    show_in_header: bool
    show_in_footer: bool
    show_in_showcase: bool
    show_in_featured: bool
    sort_order: int
    prompt_count: int | None = None


class AiModelCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    version: str | None = Field(default=None, max_length=50)


class AiModelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    version: str | None = None
