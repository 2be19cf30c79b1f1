"""Admin content API: prompts, blogs, categories, AI models and image uploads.

Every route requires the admin role (router-level dependency).
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, File, Query, Request, Response, UploadFile

from app.api.v1.dependencies import (
    AdminUser,
    get_ai_model_repo_for_write,
    get_blog_service,
    get_category_service,
    get_prompt_service,
    get_upload_service,
    require_admin,
)
from app.application.dtos.blog import BlogCreate
from app.application.dtos.prompt import PromptCreate
from app.application.services.blog_service import BlogService
from app.application.services.category_service import CategoryService
from app.application.services.prompt_service import PromptService
from app.application.use_cases.uploads import ImageUploadService
from app.core.limiter import limit_upload, limit_writes
from app.infrastructure.persistence.repositories import AiModelRepository
from app.schemas.admin import UploadResponse
from app.schemas.blog import (
    BlogCreateRequest,
    BlogListResponse,
    BlogResponse,
    BlogUpdateRequest,
)
from app.schemas.category import (
    AiModelCreateRequest,
    AiModelResponse,
    CategoryCreateRequest,
    CategoryMoveRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from app.schemas.prompt import (
    PromptCreateRequest,
    PromptListResponse,
    PromptResponse,
    PromptUpdateRequest,
)

router = APIRouter(dependencies=[Depends(require_admin)])

StatusFilter = Literal["draft", "published", "archived"] | None


# ---- Prompts ----


@router.get("/prompts", response_model=PromptListResponse)
async def admin_list_prompts(
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
    status: StatusFilter = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
):
    items, total = await prompt_svc.list_all(status=status, skip=skip, limit=limit)
    return PromptListResponse(
        items=[PromptResponse.model_validate(p) for p in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.post("/prompts", response_model=PromptResponse, status_code=201)
@limit_writes
async def admin_create_prompt(
    request: Request,
    body: PromptCreateRequest,
    admin: AdminUser,
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
):
    """Create a prompt; slug and 4-digit prompt code are generated."""
    prompt = await prompt_svc.create_prompt(
        PromptCreate(**body.model_dump(), created_by=admin.id)
    )
    return PromptResponse.model_validate(prompt)


@router.get("/prompts/{prompt_id}", response_model=PromptResponse)
async def admin_get_prompt(
    prompt_id: str,
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
):
    return PromptResponse.model_validate(await prompt_svc.get_prompt(prompt_id))


@router.patch("/prompts/{prompt_id}", response_model=PromptResponse)
@limit_writes
async def admin_update_prompt(
    request: Request,
    prompt_id: str,
    body: PromptUpdateRequest,
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
):
    prompt = await prompt_svc.update_prompt(prompt_id, **body.changes())
    return PromptResponse.model_validate(prompt)


@router.delete("/prompts/{prompt_id}", status_code=204)
@limit_writes
async def admin_delete_prompt(
    request: Request,
    prompt_id: str,
    prompt_svc: Annotated[PromptService, Depends(get_prompt_service)],
):
    await prompt_svc.delete_prompt(prompt_id)
    return Response(status_code=204)


# ---- Blogs ----


@router.get("/blogs", response_model=BlogListResponse)
async def admin_list_blogs(
    blog_svc: Annotated[BlogService, Depends(get_blog_service)],
    status: StatusFilter = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
):
    items, total = await blog_svc.list_all(status=status, skip=skip, limit=limit)
    return BlogListResponse(
        items=[BlogResponse.model_validate(b) for b in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.post("/blogs", response_model=BlogResponse, status_code=201)
@limit_writes
async def admin_create_blog(
    request: Request,
    body: BlogCreateRequest,
    admin: AdminUser,
    blog_svc: Annotated[BlogService, Depends(get_blog_service)],
):
    blog = await blog_svc.create_blog(BlogCreate(**body.model_dump(), author_id=admin.id))
    return BlogResponse.model_validate(blog)


@router.get("/blogs/{blog_id}", response_model=BlogResponse)
async def admin_get_blog(
    blog_id: str,
    blog_svc: Annotated[BlogService, Depends(get_blog_service)],
):
    return BlogResponse.model_validate(await blog_svc.get_blog(blog_id))


@router.patch("/blogs/{blog_id}", response_model=BlogResponse)
@limit_writes
async def admin_update_blog(
    request: Request,
    blog_id: str,
    body: BlogUpdateRequest,
    blog_svc: Annotated[BlogService, Depends(get_blog_service)],
):
    blog = await blog_svc.update_blog(blog_id, **body.changes())
    return BlogResponse.model_validate(blog)


@router.delete("/blogs/{blog_id}", status_code=204)
@limit_writes
async def admin_delete_blog(
    request: Request,
    blog_id: str,
    blog_svc: Annotated[BlogService, Depends(get_blog_service)],
):
    await blog_svc.delete_blog(blog_id)
    return Response(status_code=204)


# ---- Categories ----


@router.post("/categories", response_model=CategoryResponse, status_code=201)
@limit_writes
async def admin_create_category(
    request: Request,
    body: CategoryCreateRequest,
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    fields = body.model_dump(exclude={"name"})
    category = await category_svc.create_category(body.name, **fields)
    return CategoryResponse.model_validate(category)


@router.patch("/categories/{category_id}", response_model=CategoryResponse)
@limit_writes
async def admin_update_category(
    request: Request,
    category_id: str,
    body: CategoryUpdateRequest,
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    category = await category_svc.update_category(category_id, **body.changes())
    return CategoryResponse.model_validate(category)


@router.post("/categories/{category_id}/move", response_model=list[CategoryResponse])
@limit_writes
async def admin_move_category(
    request: Request,
    category_id: str,
    body: CategoryMoveRequest,
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    """Move one place up or down; returns the reordered list."""
    items = await category_svc.move(category_id, body.direction)
    return [CategoryResponse.model_validate(c) for c in items]


@router.delete("/categories/{category_id}", status_code=204)
@limit_writes
async def admin_delete_category(
    request: Request,
    category_id: str,
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    await category_svc.delete_category(category_id)
    return Response(status_code=204)


# ---- AI models ----


@router.post("/ai-models", response_model=AiModelResponse, status_code=201)
@limit_writes
async def admin_create_ai_model(
    request: Request,
    body: AiModelCreateRequest,
    ai_model_repo: Annotated[AiModelRepository, Depends(get_ai_model_repo_for_write)],
):
    model = await ai_model_repo.create(body.name, body.version)
    return AiModelResponse.model_validate(model)


# ---- Uploads ----


@router.post("/uploads/{bucket}", response_model=UploadResponse, status_code=201)
@limit_upload
async def admin_upload_image(
    request: Request,
    bucket: Literal["prompt-images", "blog-images"],
    upload_svc: Annotated[ImageUploadService, Depends(get_upload_service)],
    file: UploadFile = File(...),
):
    """Store an image and return its public URL."""
    data = await file.read()
    url = await upload_svc.upload_image(bucket, data, file.content_type or "")
    return UploadResponse(url=url, bucket=bucket)
